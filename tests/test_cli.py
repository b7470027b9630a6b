# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from data_export.cli import app

runner = CliRunner()


def write_records(path, n: int) -> None:
    path.write_text(json.dumps([{"id": i} for i in range(n)]), encoding="utf-8")


def test_export_command_writes_segments(tmp_path) -> None:
    source = tmp_path / "records.json"
    write_records(source, 5)
    out = tmp_path / "out"

    result = runner.invoke(
        app,
        [
            "export",
            str(source),
            "--out",
            str(out),
            "--pattern",
            "batch-%Misc.FileNumber%",
            "--segment-size",
            "2",
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == [
        "batch-00000.json",
        "batch-00001.json",
        "batch-00002.json",
    ]
    assert "Exported" in result.output


def test_export_command_reads_json_lines_as_csv(tmp_path) -> None:
    source = tmp_path / "records.jsonl"
    source.write_text('{"id": 1}\n{"id": 2}\n', encoding="utf-8")
    out = tmp_path / "out"

    result = runner.invoke(
        app,
        ["export", str(source), "-o", str(out), "--format", "csv", "--segment-size", "0"],
    )

    assert result.exit_code == 0, result.output
    assert [p.suffix for p in out.iterdir()] == [".csv"]


def test_export_command_rejects_unknown_format(tmp_path) -> None:
    source = tmp_path / "records.json"
    write_records(source, 1)

    result = runner.invoke(app, ["export", str(source), "--format", "xml"])

    assert result.exit_code != 0


def test_names_command_previews_names() -> None:
    result = runner.invoke(
        app,
        ["names", "--count", "2", "--pattern", "x-%Misc.FileNumber%", "--extension", ".csv"],
    )

    assert result.exit_code == 0, result.output
    assert "x-00000.csv" in result.output
    assert "x-00001.csv" in result.output


def test_export_command_reports_malformed_input(tmp_path) -> None:
    source = tmp_path / "records.json"
    source.write_text('{\n  "id": 1\n}\n', encoding="utf-8")

    result = runner.invoke(app, ["export", str(source), "-o", str(tmp_path / "out")])

    assert result.exit_code == 2
    assert not isinstance(result.exception, json.JSONDecodeError)
    assert not (tmp_path / "out").exists()


def test_export_command_rejects_non_object_records(tmp_path) -> None:
    source = tmp_path / "records.json"
    source.write_text("[1, 2]", encoding="utf-8")

    result = runner.invoke(app, ["export", str(source), "-o", str(tmp_path / "out")])

    assert result.exit_code == 2
