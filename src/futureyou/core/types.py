"""Shared enums for the core and domain layers."""
from __future__ import annotations

from enum import Enum


class Move(Enum):
    """The player's choice for the current hour-slot."""

    FOCUS = "FOCUS"
    WASTE = "WASTE"


class CounterpartMove(Enum):
    """Future You's simulated response."""

    COOPERATE = "COOPERATE"
    DEFECT = "DEFECT"


class LockState(Enum):
    """Whether a round may still be played in the current hour-slot."""

    OPEN = "OPEN"
    LOCKED = "LOCKED"


__all__ = ["CounterpartMove", "LockState", "Move"]
