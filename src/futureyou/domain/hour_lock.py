"""Hour-slot arithmetic and the lock that allows one round per slot."""
from __future__ import annotations

from datetime import datetime, tzinfo

from futureyou.core.types import LockState
from futureyou.domain.state import GameState

HOUR_SECONDS = 3600


def hour_slot_start(moment: datetime) -> int:
    """Truncate a moment to its hour and return it as epoch seconds.

    Naive datetimes are read as local time, aware ones in their own zone.
    """
    truncated = moment.replace(minute=0, second=0, microsecond=0)
    return int(truncated.timestamp())


def next_hour_start(hour_start: int) -> int:
    return hour_start + HOUR_SECONDS


def lock_state(state: GameState, current_hour_start: int) -> LockState:
    """Return LOCKED when the last decision was made in the current slot."""
    if state.last_decision_hour == current_hour_start:
        return LockState.LOCKED
    return LockState.OPEN


def is_locked(state: GameState, current_hour_start: int) -> bool:
    return lock_state(state, current_hour_start) is LockState.LOCKED


def _format_hour(moment: datetime) -> str:
    return f"{moment.hour:02d}:00"


def format_hour_block(hour_start: int, tz: tzinfo | None = None) -> str:
    """Return the slot as ``"HH:00 – HH:00"``."""
    start = datetime.fromtimestamp(hour_start, tz)
    end = datetime.fromtimestamp(next_hour_start(hour_start), tz)
    return f"{_format_hour(start)} – {_format_hour(end)}"


def format_next_game(hour_start: int, tz: tzinfo | None = None) -> str:
    """Return the wall-clock hour at which the next round opens."""
    return _format_hour(datetime.fromtimestamp(next_hour_start(hour_start), tz))
