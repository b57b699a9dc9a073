"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BEAST_TASK = "Work on main project"


@dataclass
class GameState:
    """Persistent record carried between sessions."""

    score: int = 0
    streak: int = 0
    # Epoch seconds of the hour-slot of the last decision; 0 means never.
    last_decision_hour: int = 0
    beast_task: str = DEFAULT_BEAST_TASK


def default_game_state() -> GameState:
    """Return the state used on first run or after an unrecoverable load."""
    return GameState()
