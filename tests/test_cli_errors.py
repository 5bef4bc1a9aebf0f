from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from sentence_focus.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["spans", "--in", str(missing), "--cursor", "0"])
    assert result.exit_code == 3


def test_cursor_out_of_range() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["spans", "--text", "Short.", "--cursor", "99"])
    assert result.exit_code == 5


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["spans", "--text", "Hello.", "--cursor", "0", "--config", str(bad_cfg)]
    )
    assert result.exit_code == 4


def test_missing_config_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["spans", "--text", "Hello.", "--cursor", "0", "--config", str(tmp_path / "nope.yml")],
    )
    assert result.exit_code == 4


def test_requires_exactly_one_source(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["spans", "--cursor", "0"])
    assert result.exit_code == 2
    in_path = tmp_path / "doc.txt"
    in_path.write_text("x", encoding="utf-8")
    result = runner.invoke(app, ["spans", "--text", "x", "--in", str(in_path), "--cursor", "0"])
    assert result.exit_code == 2
