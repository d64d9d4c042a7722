"""Tests for the sort command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from notekit.cli import cli

RECORDS = [
    {"Title": "Beta", "Seq": "1.10"},
    {"Title": "Alpha", "Seq": "1.2"},
    {"Title": "Gamma", "Seq": "1"},
]


def _titles(output: str) -> list[str]:
    return [item["title"] for item in json.loads(output)["data"]["items"]]


@pytest.mark.usefixtures("_isolated_config")
class TestSortCommand:
    @pytest.fixture
    def notes_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "notes.json"
        path.write_text(json.dumps(RECORDS), encoding="utf-8")
        return path

    def test_sort_file(self, cli_runner: CliRunner, notes_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "sort", str(notes_file)])
        assert result.exit_code == 0
        assert _titles(result.output) == ["Alpha", "Beta", "Gamma"]

    def test_sort_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "sort", "-"], input=json.dumps(RECORDS))
        assert result.exit_code == 0
        assert _titles(result.output) == ["Alpha", "Beta", "Gamma"]

    def test_sort_by(self, cli_runner: CliRunner, notes_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "sort", str(notes_file), "--by", "seq_plus_title"])
        assert result.exit_code == 0
        assert _titles(result.output) == ["Gamma", "Alpha", "Beta"]
        assert json.loads(result.output)["meta"]["sort_parm"] == "seq_plus_title"

    def test_sort_descending(self, cli_runner: CliRunner, notes_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "sort", str(notes_file), "--descending"])
        assert _titles(result.output) == ["Gamma", "Beta", "Alpha"]

    def test_quiet_prints_ids(self, cli_runner: CliRunner, notes_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "sort", str(notes_file)])
        assert result.exit_code == 0
        assert result.output.split() == ["alpha", "beta", "gamma"]

    def test_human_table(self, cli_runner: CliRunner, notes_file: Path) -> None:
        result = cli_runner.invoke(cli, ["sort", str(notes_file)])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "position" in result.output

    def test_config_policy(self, cli_runner: CliRunner, notes_file: Path, tmp_path: Path) -> None:
        (tmp_path / "notekit.toml").write_text(
            '[collection]\nsort_parm = "seq_plus_title"\nsort_descending = true\n', encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["--json", "sort", str(notes_file)])
        assert _titles(result.output) == ["Beta", "Alpha", "Gamma"]

    def test_invalid_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "sort", str(bad)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_INPUT"

    def test_not_a_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-"], input='{"Title": "A"}')
        assert result.exit_code == 1
        assert "[INVALID_INPUT]" in result.output

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "missing.json"])
        assert result.exit_code == 2
