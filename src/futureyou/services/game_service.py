"""Hourly round flow: load, lock check, resolve, persist."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from futureyou.core.clock import Clock, SystemClock
from futureyou.core.types import LockState, Move
from futureyou.data.errors import DataLoadError
from futureyou.data.state_store import StateStore
from futureyou.domain import hour_lock
from futureyou.domain.round_resolver import Outcome, apply_outcome, resolve
from futureyou.domain.state import GameState, default_game_state
from futureyou.services.errors import HourLockedError, InvalidTaskError, SaveLoadError
from futureyou.services.save_service import SaveService

logger = logging.getLogger("futureyou.game")


@dataclass(slots=True)
class GameView:
    """Read-only snapshot of what the screen should show."""

    score: int
    streak: int
    beast_task: str
    hour_start: int
    hour_block: str
    lock_state: LockState
    next_game_at: str

    @property
    def is_locked(self) -> bool:
        return self.lock_state is LockState.LOCKED


class GameService:
    """Coordinates the resolver, the hour lock and persistence."""

    def __init__(
        self,
        *,
        store: StateStore,
        save_service: SaveService | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._save_service = save_service or SaveService()
        self._clock = clock or SystemClock()

    def load_state(self) -> GameState:
        """Return the persisted state, or the default one if it is absent or unusable."""
        try:
            payload = self._store.load()
        except DataLoadError as exc:
            logger.warning(f"Could not read saved state, starting fresh: {exc}")
            return default_game_state()
        if payload is None:
            logger.info("No saved state found, starting fresh")
            return default_game_state()
        try:
            return self._save_service.deserialize(payload)
        except SaveLoadError as exc:
            logger.warning(f"Saved state is invalid, starting fresh: {exc}")
            return default_game_state()

    def save_state(self, state: GameState) -> None:
        self._store.save(self._save_service.serialize(state))

    def current_hour_start(self) -> int:
        return hour_lock.hour_slot_start(self._clock.now())

    def lock_state(self, state: GameState) -> LockState:
        return hour_lock.lock_state(state, self.current_hour_start())

    def get_view(self, state: GameState) -> GameView:
        """Build the view for the current moment."""
        now = self._clock.now()
        hour_start = hour_lock.hour_slot_start(now)
        return GameView(
            score=state.score,
            streak=state.streak,
            beast_task=state.beast_task,
            hour_start=hour_start,
            hour_block=hour_lock.format_hour_block(hour_start, now.tzinfo),
            lock_state=hour_lock.lock_state(state, hour_start),
            next_game_at=hour_lock.format_next_game(hour_start, now.tzinfo),
        )

    def play_round(self, state: GameState, move: Move) -> Outcome:
        """Resolve the player's move for this hour-slot and persist the result.

        Raises HourLockedError, leaving the state untouched, when a round was
        already played in the current slot. The live state only changes once
        the new record has been written; DataSaveError propagates otherwise.
        """
        hour_start = self.current_hour_start()
        if hour_lock.is_locked(state, hour_start):
            raise HourLockedError("This hour has already been played.")
        outcome = resolve(move, state.streak)
        updated = replace(state)
        apply_outcome(updated, outcome, hour_start)
        self.save_state(updated)
        apply_outcome(state, outcome, hour_start)
        logger.info(
            f"Round resolved: {outcome.player_move.value} vs {outcome.counterpart_move.value} "
            f"({outcome.label}) delta={outcome.score_delta:+d} streak={outcome.new_streak} "
            f"score={state.score}"
        )
        return outcome

    def set_beast_task(self, state: GameState, task: str) -> None:
        """Replace the beast task label."""
        cleaned = task.strip()
        if not cleaned:
            raise InvalidTaskError("Beast task cannot be blank.")
        self.save_state(replace(state, beast_task=cleaned))
        state.beast_task = cleaned
        logger.info(f"Beast task set to {cleaned!r}")

    def reset_state(self) -> GameState:
        """Delete the saved record and return the default state."""
        self._store.clear()
        state = default_game_state()
        logger.warning("Game state reset to defaults")
        return state
