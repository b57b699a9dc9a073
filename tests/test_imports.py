def test_import_futureyou_package() -> None:
    import importlib

    module = importlib.import_module("futureyou")
    assert module is not None


def test_import_resolver_no_side_effects() -> None:
    from futureyou.core.types import Move
    from futureyou.domain.round_resolver import resolve

    outcome = resolve(Move.FOCUS, 0)
    assert outcome.new_streak == 1
