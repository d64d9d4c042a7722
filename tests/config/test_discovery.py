"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from notekit.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from notekit.config.models import NotekitConfig
from notekit.domain.types import NoteSortParm


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[collection]\ntitle = "test"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[collection]\ntitle = "test"\n')
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[collection]\ntitle = "env"\n')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            "[collection]\n"
            'title = "Reading"\n'
            'sort_parm = "author"\n'
            "locked = true\n"
            "[[collection.fields]]\n"
            'label = "Title"\n'
            "[[collection.fields]]\n"
            'label = "Pages"\n'
            'type = "int"\n'
        )
        cfg = load_config(config_file)
        assert cfg.collection.title == "Reading"
        assert cfg.collection.sort_parm == NoteSortParm.AUTHOR
        assert cfg.collection.locked is True
        assert [f.label for f in cfg.collection.fields] == ["Title", "Pages"]
        assert cfg.collection.fields[1].type == "int"
        assert cfg.plugins.enabled is True  # default

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == NotekitConfig()

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert load_config(config_file) == NotekitConfig()
