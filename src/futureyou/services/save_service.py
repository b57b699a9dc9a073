"""Serialization helpers for the persisted game record."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from futureyou.domain.state import GameState
from futureyou.services.errors import SaveLoadError

SavePayload = Dict[str, Any]
_LEGACY_KEYS = ("score", "streak", "lastDecisionHour", "beastTask")


class SaveService:
    """Converts runtime state to/from a validated, versioned payload."""

    SAVE_VERSION = 1

    def serialize(self, state: GameState) -> SavePayload:
        """Return a JSON-serializable payload for disk persistence."""
        return {
            "save_version": self.SAVE_VERSION,
            "metadata": self._build_metadata(state),
            "state": {
                "score": state.score,
                "streak": state.streak,
                "last_decision_hour": state.last_decision_hour,
                "beast_task": state.beast_task,
            },
        }

    def deserialize(self, payload: Mapping[str, Any]) -> GameState:
        """Rehydrate a GameState from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if "save_version" not in payload and self._looks_legacy(payload):
            return self._deserialize_legacy(payload)
        version = payload.get("save_version")
        if version != self.SAVE_VERSION:
            raise SaveLoadError(f"Unsupported save version: {version!r}")
        state_payload = payload.get("state")
        if not isinstance(state_payload, Mapping):
            raise SaveLoadError("Save data is missing the state section.")

        return GameState(
            score=self._require_int(state_payload.get("score"), "state.score"),
            streak=self._require_non_negative_int(state_payload.get("streak"), "state.streak"),
            last_decision_hour=self._require_non_negative_int(
                state_payload.get("last_decision_hour"), "state.last_decision_hour"
            ),
            beast_task=self._require_str(state_payload.get("beast_task"), "state.beast_task"),
        )

    @staticmethod
    def _looks_legacy(payload: Mapping[str, Any]) -> bool:
        return all(key in payload for key in _LEGACY_KEYS)

    def _deserialize_legacy(self, payload: Mapping[str, Any]) -> GameState:
        # Flat camelCase record with the decision hour in milliseconds.
        last_decision_ms = self._require_non_negative_int(
            payload.get("lastDecisionHour"), "lastDecisionHour"
        )
        return GameState(
            score=self._require_int(payload.get("score"), "score"),
            streak=self._require_non_negative_int(payload.get("streak"), "streak"),
            last_decision_hour=last_decision_ms // 1000,
            beast_task=self._require_str(payload.get("beastTask"), "beastTask"),
        )

    @staticmethod
    def _build_metadata(state: GameState) -> Dict[str, Any]:
        return {
            "score": state.score,
            "streak": state.streak,
            "saved_at": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    def _require_non_negative_int(self, value: Any, context: str) -> int:
        value_int = self._require_int(value, context)
        if value_int < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value_int
