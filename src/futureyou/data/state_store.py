"""File-system storage for the single persisted game record."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from futureyou.data import paths
from futureyou.data.errors import DataLoadError, DataSaveError

logger = logging.getLogger("futureyou.store")


class StateStore:
    """Reads and writes the game record under a fixed file name."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else paths.get_state_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Any] | None:
        """Return the stored payload, or None when nothing was saved yet."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise DataLoadError(f"Unable to read state file: {self._path}") from exc

        try:
            payload = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise DataLoadError(f"Invalid JSON in {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise DataLoadError(f"Expected top-level object in {self._path}")
        return payload

    def save(self, payload: Dict[str, Any]) -> None:
        """Persist the payload, replacing any previous record."""
        tmp_path = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise DataSaveError(f"Unable to write state file: {self._path}") from exc
        logger.debug(f"Saved state to {self._path}")

    def clear(self) -> None:
        """Delete the stored record if it exists."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise DataSaveError(f"Unable to delete state file: {self._path}") from exc
