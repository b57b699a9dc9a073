"""Helpers for resolving where the game keeps its files."""
from __future__ import annotations

import os
from pathlib import Path

HOME_ENV_VAR = "FUTURE_YOU_HOME"
STATE_FILENAME = "future_you_game_state.json"


def get_user_data_dir() -> Path:
    """Return the per-user data directory, honouring FUTURE_YOU_HOME."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "FutureYou"
        return Path.home() / "FutureYou"
    return Path.home() / ".config" / "future_you"


def get_state_path(base_dir: Path | str | None = None) -> Path:
    """Return the path of the persisted game record."""
    directory = Path(base_dir) if base_dir is not None else get_user_data_dir()
    return directory / STATE_FILENAME


def get_config_path(base_dir: Path | str | None = None) -> Path:
    """Return the path of the user options file."""
    directory = Path(base_dir) if base_dir is not None else get_user_data_dir()
    return directory / "config.json"
