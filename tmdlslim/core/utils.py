from __future__ import annotations
import chardet  # type: ignore
from pathlib import Path
from typing import List, Tuple

from .errors import DocumentReadError


def decode_document(data: bytes, path: Path) -> str:
    """Decode raw document bytes: UTF-8 (BOM stripped) first, then chardet's guess."""
    if not data:
        return ""
    try:
        return data.decode("utf-8-sig", errors="strict")
    except UnicodeDecodeError:
        pass
    enc = chardet.detect(data).get("encoding")
    if enc:
        try:
            return data.decode(enc, errors="strict")
        except (LookupError, UnicodeDecodeError):
            pass
    raise DocumentReadError(path, "undecodable content")


def read_document_text(path: Path) -> Tuple[str, int]:
    """Return ``(text, size_in_bytes)``; any I/O failure is fatal."""
    try:
        with path.open("rb") as f:
            data = f.read()
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    return decode_document(data, path), len(data)


def split_lines(text: str) -> List[str]:
    return text.splitlines()


def format_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes:,} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:,.1f} KB"
    return f"{num_bytes / (1024 * 1024):,.1f} MB"
