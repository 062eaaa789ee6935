"""Test the codes and explain CLI commands end-to-end."""

import json

from click.testing import CliRunner

from sqldiag.cli import main


def test_codes_text(tmp_path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["codes", "--config", str(tmp_path / "none.toml")])
    assert result.exit_code == 0
    assert "SQL00001" in result.output
    assert "SQL00013" in result.output
    assert "(suppressed)" not in result.output


def test_codes_json_marks_suppressed(tmp_path) -> None:
    config = tmp_path / "config.toml"
    config.write_text('[diagnostics]\nsuppress = ["SQL00009"]\n')
    runner = CliRunner()
    result = runner.invoke(main, ["codes", "--format", "json", "--config", str(config)])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert len(data) == 13
    suppressed = [entry["code"] for entry in data if entry["suppressed"]]
    assert suppressed == ["SQL00009"]


def test_codes_bad_config(tmp_path) -> None:
    config = tmp_path / "config.toml"
    config.write_text('[diagnostics]\nsuppress = ["SQL12345"]\n')
    runner = CliRunner()
    result = runner.invoke(main, ["codes", "--config", str(config)])
    assert result.exit_code == 1
    assert "unknown diagnostic code SQL12345" in result.output


def test_explain_text() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["explain", "SQL00011"])
    assert result.exit_code == 0
    assert "SQL00011: table_operation_column_type_mismatch" in result.output
    assert "highlights: operator" in result.output


def test_explain_json() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["explain", "SQL00006", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["name"] == "all_star_selection_requires_table_sources"
    assert data["property"] is None
    assert data["severity"] == "error"


def test_explain_unknown_code() -> None:
    runner = CliRunner()
    for code in ["SQL99999", "nonsense"]:
        result = runner.invoke(main, ["explain", code])
        assert result.exit_code == 1
        assert "unknown diagnostic code" in result.output


def test_codes_non_utf8_config(tmp_path) -> None:
    config = tmp_path / "config.toml"
    config.write_bytes(b'[diagnostics]\nsuppress = ["\xff"]\n')
    runner = CliRunner()
    result = runner.invoke(main, ["codes", "--config", str(config)])
    assert result.exit_code == 1
    assert "error: Cannot read" in result.output
