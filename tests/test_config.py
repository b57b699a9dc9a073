from pathlib import Path

from futureyou.presentation.cli import config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {"confirm_moves": True}


def test_load_config_defaults_when_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("nope", encoding="utf-8")
    assert config.load_config(path) == {"confirm_moves": True}


def test_load_config_ignores_non_bool(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"confirm_moves": "no"}', encoding="utf-8")
    assert config.load_config(path) == {"confirm_moves": True}


def test_save_and_load_config(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "config.json"
    config.save_config({"confirm_moves": False}, path)
    assert config.load_config(path) == {"confirm_moves": False}


def test_default_config_path_follows_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FUTURE_YOU_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text('{"confirm_moves": false}', encoding="utf-8")
    assert config.load_config() == {"confirm_moves": False}


def test_load_config_defaults_when_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe\x00")
    assert config.load_config(path) == {"confirm_moves": True}
