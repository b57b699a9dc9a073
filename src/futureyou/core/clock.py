"""Clock wrappers so time can be injected into services."""
from __future__ import annotations

from datetime import datetime, timedelta


class Clock:
    """Source of the current time."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Clock backed by the local wall time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        """Jump to an absolute moment."""
        self._moment = moment

    def advance(self, *, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        """Move forward by the given amount."""
        self._moment = self._moment + timedelta(hours=hours, minutes=minutes, seconds=seconds)
