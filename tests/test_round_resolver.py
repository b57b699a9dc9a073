import pytest

from futureyou.core.types import CounterpartMove, Move
from futureyou.domain.round_resolver import (
    COOPERATION_THRESHOLD,
    PAYOFF_TABLE,
    apply_outcome,
    counterpart_response,
    resolve,
)
from futureyou.domain.state import GameState


@pytest.mark.parametrize("streak", [3, 4, 7, 50])
def test_focus_with_established_streak_is_rewarded(streak: int) -> None:
    outcome = resolve(Move.FOCUS, streak)

    assert outcome.counterpart_move is CounterpartMove.COOPERATE
    assert outcome.score_delta == 10
    assert outcome.new_streak == streak + 1
    assert outcome.label == "Momentum"


@pytest.mark.parametrize("streak", [0, 1, 2])
def test_focus_below_threshold_meets_skepticism(streak: int) -> None:
    outcome = resolve(Move.FOCUS, streak)

    assert outcome.counterpart_move is CounterpartMove.DEFECT
    assert outcome.score_delta == 4
    assert outcome.new_streak == streak + 1
    assert outcome.sub_message == "But Future You is still skeptical. Keep pushing."


@pytest.mark.parametrize("streak", [3, 5, 12])
def test_waste_with_established_streak_costs_six(streak: int) -> None:
    outcome = resolve(Move.WASTE, streak)

    assert outcome.counterpart_move is CounterpartMove.COOPERATE
    assert outcome.score_delta == -6
    assert outcome.new_streak == 0
    assert outcome.message == "You defected 💀"


@pytest.mark.parametrize("streak", [0, 1, 2])
def test_waste_below_threshold_spirals(streak: int) -> None:
    outcome = resolve(Move.WASTE, streak)

    assert outcome.counterpart_move is CounterpartMove.DEFECT
    assert outcome.score_delta == -8
    assert outcome.new_streak == 0
    assert outcome.label == "Spiral"


def test_threshold_is_three() -> None:
    assert COOPERATION_THRESHOLD == 3
    assert counterpart_response(2) is CounterpartMove.DEFECT
    assert counterpart_response(3) is CounterpartMove.COOPERATE


def test_payoff_table_covers_every_pair() -> None:
    pairs = {(move, response) for move in Move for response in CounterpartMove}
    assert set(PAYOFF_TABLE) == pairs


def test_focus_messages_share_header() -> None:
    focus_headers = {resolve(Move.FOCUS, streak).message for streak in (0, 3)}
    assert focus_headers == {"You cooperated 🤝"}


def test_resolve_rejects_negative_streak() -> None:
    with pytest.raises(ValueError):
        resolve(Move.FOCUS, -1)


def test_resolve_rejects_unknown_move() -> None:
    with pytest.raises(ValueError):
        resolve("FOCUS", 0)  # type: ignore[arg-type]


def test_resolve_does_not_touch_state() -> None:
    state = GameState(score=5, streak=2)
    resolve(Move.WASTE, state.streak)
    assert state == GameState(score=5, streak=2)


def test_apply_outcome_updates_score_streak_and_hour() -> None:
    state = GameState(score=-3, streak=4, last_decision_hour=100)
    outcome = resolve(Move.FOCUS, state.streak)

    apply_outcome(state, outcome, hour_start=7200)

    assert state.score == 7
    assert state.streak == 5
    assert state.last_decision_hour == 7200
    assert state.beast_task == "Work on main project"


def test_score_can_go_negative() -> None:
    state = GameState()
    apply_outcome(state, resolve(Move.WASTE, 0), hour_start=3600)
    assert state.score == -8
    assert state.streak == 0
