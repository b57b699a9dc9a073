"""Service layer exports."""

from .errors import HourLockedError, InvalidTaskError, NoMoveSelectedError, SaveLoadError
from .game_service import GameService, GameView
from .save_service import SaveService

__all__ = [
    "GameService",
    "GameView",
    "HourLockedError",
    "InvalidTaskError",
    "NoMoveSelectedError",
    "SaveLoadError",
    "SaveService",
]
