"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from futureyou.data import paths

logger = logging.getLogger("futureyou.config")

_DEFAULT_CONFIRM_MOVES = True


def _defaults() -> Dict[str, bool]:
    return {"confirm_moves": _DEFAULT_CONFIRM_MOVES}


def _normalize_confirm_moves(value: object) -> bool:
    return value if isinstance(value, bool) else _DEFAULT_CONFIRM_MOVES


def load_config(path: Path | None = None) -> Dict[str, bool]:
    """Load config from disk or return defaults."""
    config_path = path or paths.get_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError) as exc:
        logger.warning(f"Ignoring unreadable config {config_path}: {exc}")
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {"confirm_moves": _normalize_confirm_moves(raw.get("confirm_moves"))}


def save_config(config: Dict[str, bool], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or paths.get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"confirm_moves": _normalize_confirm_moves(config.get("confirm_moves"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
