from __future__ import annotations
from typing import Iterable


def normalize_output(lines: Iterable[str]) -> str:
    """Collapse filtered lines into final text.

    Trailing spaces/tabs are stripped, every blank line is dropped (intentional
    blank lines inside comment blocks included), the whole text is trimmed and
    exactly one ``\\n`` terminates it. Empty input gives an empty string.
    """
    kept = [line.rstrip(" \t") for line in lines]
    kept = [line for line in kept if line.strip()]
    text = "\n".join(kept).strip()
    if not text:
        return ""
    return text + "\n"


def normalize_text(text: str) -> str:
    return normalize_output(text.splitlines())
