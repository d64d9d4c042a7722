"""Tests for the seq command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from notekit.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestSeqCommands:
    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "seq", "parse", "1.2b"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["levels"] == 2

    def test_inc(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["seq", "inc", "1.9"])
        assert result.exit_code == 0
        assert "value: 1.10" in result.output

    def test_inc_level(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "seq", "inc", "1.3.2", "--level", "1", "--remove-deeper"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.4"

    def test_inc_negative_level(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["seq", "inc", "1.2", "--level", "-1"])
        assert result.exit_code == 1
        assert "[INVALID_INPUT]" in result.output

    def test_key_sorts(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "seq", "key", "2", "1.10", "1"])
        assert result.exit_code == 0
        assert result.output.split() == ["1", "1.10", "2"]

    def test_key_requires_values(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["seq", "key"])
        assert result.exit_code == 2
