"""UI-agnostic session controller that separates the round flow from rendering."""
from __future__ import annotations

from futureyou.core.types import Move
from futureyou.domain.round_resolver import Outcome
from futureyou.domain.state import GameState
from futureyou.services.errors import NoMoveSelectedError
from futureyou.services.game_service import GameService, GameView


class SessionController:
    """
    Holds the transient parts of a play session.

    The flow is select a move, confirm it, then acknowledge the outcome. The
    controller keeps the selected move and the pending outcome between those
    steps; the persistent record lives in GameState and is handled by
    GameService.

    Non-responsibilities (handled by presentation layer):
    - Rendering the view or the outcome
    - Prompting for user input
    """

    def __init__(self, game_service: GameService, state: GameState) -> None:
        self._service = game_service
        self._state = state
        self._selected_move: Move | None = None
        self._pending_outcome: Outcome | None = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected_move(self) -> Move | None:
        return self._selected_move

    @property
    def pending_outcome(self) -> Outcome | None:
        return self._pending_outcome

    def view(self) -> GameView:
        return self._service.get_view(self._state)

    def is_locked(self) -> bool:
        return self.view().is_locked

    def select_move(self, move: Move) -> None:
        self._selected_move = move

    def clear_selection(self) -> None:
        self._selected_move = None

    def confirm(self) -> Outcome:
        """Play the selected move. HourLockedError propagates from the service."""
        if self._selected_move is None:
            raise NoMoveSelectedError("Select FOCUS or WASTE before confirming.")
        outcome = self._service.play_round(self._state, self._selected_move)
        self._pending_outcome = outcome
        return outcome

    def acknowledge_outcome(self) -> None:
        """Dismiss the pending outcome and reset the selection."""
        self._pending_outcome = None
        self._selected_move = None

    def edit_task(self, task: str) -> None:
        self._service.set_beast_task(self._state, task)

    def reset(self) -> None:
        """Replace the session state with a freshly saved default."""
        self._state = self._service.reset_state()
        self.acknowledge_outcome()
