from pathlib import Path
from tmdlslim.cli import main

def test_smoke(tmp_path: Path):
    # A tiny model folder with one document carrying removable metadata
    model = tmp_path / "model"
    model.mkdir()
    (model / "table.tmdl").write_text('lineageTag: "abc123"\nisHidden\nisKey: true\n\n// a comment   \n')
    out = tmp_path / "out" / "model.slim.tmdl"
    code = main(["dir", str(model), "--out", str(out), "--no-progress"])
    assert code == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "// Slim TMDL export"
    assert lines[1] == "// Source: model"
    assert lines[2].startswith("// Generated: ")
    assert lines[3:] == ["isKey: true", "// a comment"]


def test_rerun_inside_model_folder_ignores_previous_output(tmp_path: Path, monkeypatch):
    model = tmp_path / "model"
    model.mkdir()
    (model / "table.tmdl").write_text("table A\n\tlineageTag: x\n")
    monkeypatch.chdir(model)
    assert main(["dir", ".", "--no-progress"]) == 0
    assert main(["dir", ".", "--no-progress"]) == 0
    text = (model / "model.slim.tmdl").read_text(encoding="utf-8")
    assert text.count("table A") == 1
    assert text.count("// Slim TMDL export") == 1
