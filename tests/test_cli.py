"""Tests for the root notekit CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from notekit import __version__
from notekit.cli import cli
from notekit.plugins.manager import PluginManager


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "notekit" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_config")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json", "--no-plugins"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/no-such-notekit.toml", "--version"])
    assert result.exit_code == 0


# --- Commands registered ---

EXPECTED_GROUPS = ["field", "seq"]

EXPECTED_COMMANDS = ["sort"]


@pytest.mark.parametrize("group", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0, f"{group} --help failed: {result.output}"


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


def test_all_commands_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_GROUPS + EXPECTED_COMMANDS:
        assert name in result.output, f"{name} missing from --help"


@pytest.mark.usefixtures("_isolated_config")
class TestPluginLoading:
    def _count_discovery(self, monkeypatch: pytest.MonkeyPatch) -> list[int]:
        calls: list[int] = []

        def fake_discover(self: PluginManager, *, disabled: list[str] | None = None) -> list[str]:
            calls.append(1)
            return []

        monkeypatch.setattr(PluginManager, "discover_and_load", fake_discover)
        return calls

    def test_plugins_loaded_by_default(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = self._count_discovery(monkeypatch)
        result = cli_runner.invoke(cli, ["field", "types"])
        assert result.exit_code == 0
        assert calls == [1]

    def test_no_plugins_flag(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = self._count_discovery(monkeypatch)
        result = cli_runner.invoke(cli, ["--no-plugins", "field", "types"])
        assert result.exit_code == 0
        assert calls == []

    def test_disabled_in_config(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        (tmp_path / "notekit.toml").write_text("[plugins]\nenabled = false\n", encoding="utf-8")
        calls = self._count_discovery(monkeypatch)
        result = cli_runner.invoke(cli, ["field", "types"])
        assert result.exit_code == 0
        assert calls == []

    def test_help_never_loads_plugins(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = self._count_discovery(monkeypatch)
        cli_runner.invoke(cli, ["field", "--help"])
        assert calls == []
