from datetime import datetime
from pathlib import Path

import pytest

from tmdlslim.core.errors import OutputWriteError
from tmdlslim.core.writer import render_document, render_header, write_output


GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5)


def test_header():
    assert render_header("Model", GENERATED_AT) == [
        "// Slim TMDL export",
        "// Source: Model",
        "// Generated: 2024-01-02 03:04:05",
    ]


def test_render_document():
    text = render_document("Model", "table A\n", GENERATED_AT)
    assert text == "// Slim TMDL export\n// Source: Model\n// Generated: 2024-01-02 03:04:05\ntable A\n"


def test_write_output_utf8_without_bom(tmp_path: Path):
    target = tmp_path / "out" / "model.slim.tmdl"
    written = write_output(target, "// Café\n")
    data = target.read_bytes()
    assert written == len(data)
    assert data == "// Café\n".encode("utf-8")
    assert not data.startswith(b"\xef\xbb\xbf")
    assert [p.name for p in target.parent.iterdir()] == ["model.slim.tmdl"]


def test_write_output_replaces_existing(tmp_path: Path):
    target = tmp_path / "model.slim.tmdl"
    target.write_text("old\n")
    write_output(target, "new\n")
    assert target.read_text() == "new\n"


def test_write_failure_raises(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(OutputWriteError):
        write_output(blocker / "model.slim.tmdl", "text\n")
    assert blocker.read_text() == "not a directory"
