from __future__ import annotations

import pytest

from futureyou.domain.state import GameState
from futureyou.services.errors import SaveLoadError
from futureyou.services.save_service import SaveService


def test_save_round_trip_preserves_state() -> None:
    save_service = SaveService()
    state = GameState(score=-14, streak=5, last_decision_hour=1767603600, beast_task="Ship the parser")

    payload = save_service.serialize(state)
    restored = save_service.deserialize(payload)

    assert restored == state


def test_serialize_includes_version_and_metadata() -> None:
    payload = SaveService().serialize(GameState(score=22, streak=4))

    assert payload["save_version"] == SaveService.SAVE_VERSION
    assert payload["metadata"]["score"] == 22
    assert payload["metadata"]["streak"] == 4
    assert "saved_at" in payload["metadata"]


def test_deserialize_rejects_unknown_version() -> None:
    payload = SaveService().serialize(GameState())
    payload["save_version"] = 99
    with pytest.raises(SaveLoadError):
        SaveService().deserialize(payload)


def test_deserialize_rejects_non_mapping() -> None:
    with pytest.raises(SaveLoadError):
        SaveService().deserialize(["not", "a", "dict"])  # type: ignore[arg-type]


def test_deserialize_rejects_missing_state_section() -> None:
    with pytest.raises(SaveLoadError):
        SaveService().deserialize({"save_version": SaveService.SAVE_VERSION})


@pytest.mark.parametrize(
    "field,value",
    [
        ("score", "12"),
        ("score", True),
        ("streak", -1),
        ("streak", 1.5),
        ("last_decision_hour", None),
        ("beast_task", 7),
    ],
)
def test_deserialize_rejects_bad_fields(field: str, value: object) -> None:
    payload = SaveService().serialize(GameState())
    payload["state"][field] = value
    with pytest.raises(SaveLoadError):
        SaveService().deserialize(payload)


def test_deserialize_migrates_legacy_record() -> None:
    legacy = {
        "score": 18,
        "streak": 3,
        "lastDecisionHour": 1767603600000,
        "beastTask": "Write the thesis",
    }

    state = SaveService().deserialize(legacy)

    assert state == GameState(
        score=18, streak=3, last_decision_hour=1767603600, beast_task="Write the thesis"
    )


def test_legacy_record_is_still_validated() -> None:
    legacy = {"score": 1, "streak": -2, "lastDecisionHour": 0, "beastTask": "x"}
    with pytest.raises(SaveLoadError):
        SaveService().deserialize(legacy)
