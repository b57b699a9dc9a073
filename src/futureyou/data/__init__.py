"""Data layer utilities for the persisted game record."""

from .errors import DataError, DataLoadError, DataSaveError
from .paths import get_state_path, get_user_data_dir
from .state_store import StateStore

__all__ = [
    "DataError",
    "DataLoadError",
    "DataSaveError",
    "StateStore",
    "get_state_path",
    "get_user_data_dir",
]
