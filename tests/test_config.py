"""Tests for environment configuration."""

from pathlib import Path

import pytest

from crystals.config import Config


def test_defaults(monkeypatch):
    for name in (
        "CRYSTALS_ROOM_COUNT",
        "CRYSTALS_SEED",
        "CRYSTALS_DARK_ROOM_CHANCE",
        "CRYSTALS_LOG_LEVEL",
        "CRYSTALS_LOG_FILE",
        "CRYSTALS_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config == Config()
    assert config.room_count is None
    assert config.dark_room_chance == 20


def test_from_env(monkeypatch):
    monkeypatch.setenv("CRYSTALS_ROOM_COUNT", "12")
    monkeypatch.setenv("CRYSTALS_SEED", "42")
    monkeypatch.setenv("CRYSTALS_DARK_ROOM_CHANCE", "0")
    monkeypatch.setenv("CRYSTALS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CRYSTALS_LOG_FILE", "/tmp/crystals.log")
    monkeypatch.setenv("CRYSTALS_JSON_LOGS", "yes")
    config = Config.from_env()
    assert config.room_count == 12
    assert config.seed == 42
    assert config.dark_room_chance == 0
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("/tmp/crystals.log")
    assert config.json_logs


def test_bad_integer_names_variable(monkeypatch):
    monkeypatch.setenv("CRYSTALS_SEED", "lots")
    with pytest.raises(ValueError, match="CRYSTALS_SEED"):
        Config.from_env()


@pytest.mark.parametrize("value", ["0", "-3"])
def test_room_count_must_be_positive(monkeypatch, value):
    monkeypatch.setenv("CRYSTALS_ROOM_COUNT", value)
    with pytest.raises(ValueError, match="CRYSTALS_ROOM_COUNT"):
        Config.from_env()
