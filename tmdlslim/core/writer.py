from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .errors import OutputWriteError


HEADER_TITLE = "// Slim TMDL export"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_header(source: str, generated_at: Optional[datetime] = None) -> List[str]:
    generated_at = generated_at or datetime.now()
    return [
        HEADER_TITLE,
        f"// Source: {source}",
        f"// Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
    ]


def render_document(source: str, body: str, generated_at: Optional[datetime] = None) -> str:
    """Header lines followed by already-normalized ``body``."""
    header = "\n".join(render_header(source, generated_at)) + "\n"
    return header + body


def write_output(path: Path, text: str) -> int:
    """Write ``text`` as UTF-8 without BOM, atomically. Returns bytes written.

    Content goes to a temporary sibling first and is moved over ``path`` with
    ``os.replace``; on failure the temporary file is removed and ``path`` is
    left untouched.
    """
    data = text.encode("utf-8")
    directory = path.parent
    tmp_name = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
    return len(data)
