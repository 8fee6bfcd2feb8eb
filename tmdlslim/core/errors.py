from __future__ import annotations
from pathlib import Path
from typing import Optional


class SlimError(Exception):
    """Base class for errors that abort a slim run."""


class NoInputError(SlimError):
    def __init__(self, location: Path) -> None:
        super().__init__(f"No .tmdl documents found under {location}")
        self.location = location


class DocumentReadError(SlimError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path


class OutputWriteError(SlimError):
    def __init__(self, path: Path, reason: Optional[str] = None) -> None:
        msg = f"Unable to write {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.path = path


class RuleSetError(SlimError):
    pass
