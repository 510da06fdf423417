"""Tests for logging configuration."""

import json
from pathlib import Path

import pytest
import structlog

from crystals.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _events(log_file: Path) -> list[dict]:
    return [json.loads(line) for line in log_file.read_text().splitlines()]


def test_unknown_level_warns_and_uses_warning(tmp_path: Path):
    log_file = tmp_path / "crystals.log"
    configure_logging(log_level="DEBG", log_file=log_file, json_logs=True)

    logger = get_logger("test")
    logger.info("hidden")
    logger.warning("shown")

    events = _events(log_file)
    assert events[0]["event"] == "unknown_log_level"
    assert events[0]["log_level"] == "DEBG"
    assert [e["event"] for e in events[1:]] == ["shown"]


def test_known_level_filters_quietly(tmp_path: Path):
    log_file = tmp_path / "crystals.log"
    configure_logging(log_level="debug", log_file=log_file, json_logs=True)

    get_logger("test").debug("step", health=99)

    [event] = _events(log_file)
    assert event["event"] == "step"
    assert event["level"] == "debug"
    assert event["health"] == 99


def test_context_is_merged(tmp_path: Path):
    log_file = tmp_path / "crystals.log"
    configure_logging(log_level="INFO", log_file=log_file, json_logs=True)

    with structlog.contextvars.bound_contextvars(seed=7):
        get_logger("test").info("maze_generated")

    [event] = _events(log_file)
    assert event["seed"] == 7
