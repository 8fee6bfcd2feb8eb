from pathlib import Path
from tmdlslim.cli import main


def _model(tmp_path: Path) -> Path:
    model = tmp_path / "model"
    model.mkdir()
    (model / "table.tmdl").write_text("table A\n\tisHidden\n")
    return model


def test_failed_report_leaves_no_output(tmp_path: Path):
    model = _model(tmp_path)
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a folder")
    out = tmp_path / "out" / "model.slim.tmdl"
    code = main(["dir", str(model), "--out", str(out), "--report", str(blocker / "report.json"), "--no-progress"])
    assert code == 1
    assert not out.exists()


def test_failed_output_removes_report(tmp_path: Path):
    model = _model(tmp_path)
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a folder")
    report = tmp_path / "report.json"
    code = main(["dir", str(model), "--out", str(blocker / "model.slim.tmdl"), "--report", str(report), "--no-progress"])
    assert code == 1
    assert not report.exists()


def test_output_under_root_is_not_read_back(tmp_path: Path):
    model = _model(tmp_path)
    out = model / "exports" / "slim.tmdl"
    assert main(["dir", str(model), "--out", str(out), "--no-progress"]) == 0
    assert main(["dir", str(model), "--out", str(out), "--no-progress"]) == 0
    assert out.read_text(encoding="utf-8").count("table A") == 1
