"""Round resolution: Future You's response and the payoff for one hour-slot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from futureyou.core.types import CounterpartMove, Move
from futureyou.domain.state import GameState

COOPERATION_THRESHOLD = 3


@dataclass(frozen=True, slots=True)
class PayoffCell:
    """One entry of the payoff table."""

    label: str
    score_delta: int
    keeps_streak: bool
    message: str
    sub_message: str


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of resolving a single round."""

    player_move: Move
    counterpart_move: CounterpartMove
    score_delta: int
    new_streak: int
    message: str
    sub_message: str
    label: str


PAYOFF_TABLE: Dict[Tuple[Move, CounterpartMove], PayoffCell] = {
    (Move.FOCUS, CounterpartMove.COOPERATE): PayoffCell(
        label="Momentum",
        score_delta=10,
        keeps_streak=True,
        message="You cooperated 🤝",
        sub_message="Future You rewards you. You made the next hour easier.",
    ),
    (Move.FOCUS, CounterpartMove.DEFECT): PayoffCell(
        label="Burnout",
        score_delta=4,
        keeps_streak=True,
        message="You cooperated 🤝",
        sub_message="But Future You is still skeptical. Keep pushing.",
    ),
    (Move.WASTE, CounterpartMove.COOPERATE): PayoffCell(
        label="Guilt",
        score_delta=-6,
        keeps_streak=False,
        message="You defected 💀",
        sub_message="You let your Future Self down. Support is withdrawing.",
    ),
    (Move.WASTE, CounterpartMove.DEFECT): PayoffCell(
        label="Spiral",
        score_delta=-8,
        keeps_streak=False,
        message="You defected 💀",
        sub_message="You chose comfort over growth. The spiral continues.",
    ),
}


def counterpart_response(current_streak: int) -> CounterpartMove:
    """Return how Future You answers a player holding the given streak."""
    if current_streak >= COOPERATION_THRESHOLD:
        return CounterpartMove.COOPERATE
    return CounterpartMove.DEFECT


def resolve(player_move: Move, current_streak: int) -> Outcome:
    """Resolve one round without touching any state.

    A FOCUS move extends the streak whatever Future You does; a WASTE move
    always resets it to zero.
    """
    if not isinstance(player_move, Move):
        raise ValueError(f"Unknown move: {player_move!r}")
    if isinstance(current_streak, bool) or not isinstance(current_streak, int):
        raise ValueError("Streak must be an integer.")
    if current_streak < 0:
        raise ValueError("Streak cannot be negative.")

    counterpart_move = counterpart_response(current_streak)
    cell = PAYOFF_TABLE[(player_move, counterpart_move)]
    new_streak = current_streak + 1 if cell.keeps_streak else 0
    return Outcome(
        player_move=player_move,
        counterpart_move=counterpart_move,
        score_delta=cell.score_delta,
        new_streak=new_streak,
        message=cell.message,
        sub_message=cell.sub_message,
        label=cell.label,
    )


def apply_outcome(state: GameState, outcome: Outcome, hour_start: int) -> None:
    """Fold an outcome into the persistent state and lock the hour-slot."""
    state.score += outcome.score_delta
    state.streak = outcome.new_streak
    state.last_decision_hour = hour_start
