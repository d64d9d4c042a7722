"""Locate and read ``notekit.toml``.

The file is searched for the way git finds ``.git/``: the start directory
first, then each parent. ``NOTEKIT_CONFIG`` pins one file and turns the
search off; ``--config`` bypasses both (see :mod:`notekit.config.settings`).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from notekit.config.models import NotekitConfig

CONFIG_FILENAME = "notekit.toml"
CONFIG_ENV_VAR = "NOTEKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """The config file governing *start* (default: cwd), or None.

    A ``NOTEKIT_CONFIG`` naming a missing file means no config at all,
    not a fallback to the search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Raw TOML tables from *path*. Raises ``tomllib.TOMLDecodeError``."""
    return tomllib.loads(path.read_text(encoding="utf-8"))


def load_config(path: Path | None = None, cwd: Path | None = None) -> NotekitConfig:
    """Validated config from *path*, or from the file found above *cwd*.

    No file means the code defaults: an unlocked collection sorted by title.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return NotekitConfig()
    return NotekitConfig.model_validate(read_config_data(path))
