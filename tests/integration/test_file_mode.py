from pathlib import Path


def test_file_mode_single_document(run_cli, dataset_dir: Path, out_dir: Path, load_json, assert_exit_ok):
    target = dataset_dir / "definition" / "tables" / "Date.tmdl"
    out = out_dir / "date.slim.tmdl"
    report = out_dir / "report.json"
    proc = run_cli(["file", target, "--out", out, "--report", report])
    assert_exit_ok(proc)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[1] == "// Source: Date.tmdl"
    assert lines[3:] == [
        "table Date",
        "\tdataCategory: Time",
        "\tcolumn DateKey",
        "\t\tdataType: dateTime",
        "\t\tisKey",
        "\t\tisUnique",
        "\t\tisHiddenMember",
    ]
    data = load_json(report)
    assert data["documents_found"] == 1
    assert data["removed"]["lineageTag"] == 2
    assert data["removed"]["extendedProperties"] == 1


def test_file_mode_culture_document_is_not_excluded(run_cli, dataset_dir: Path, out_dir: Path, assert_exit_ok):
    target = dataset_dir / "definition" / "cultures" / "en-US.tmdl"
    out = out_dir / "culture.slim.tmdl"
    assert_exit_ok(run_cli(["file", target, "--out", out]))
    body = out.read_text(encoding="utf-8").splitlines()[3:]
    assert body == ["cultureInfo en-US", "\tcontentType: json"]
