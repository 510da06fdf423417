"""Tests for the console front end, driven by scripted input."""

import io

from crystals.config import Config
from crystals.console import ConsoleView, run_console
from crystals.engine.commands import GAME_OVER_MESSAGE


def _scripted(lines: list[str]):
    """input() stand-in that replays lines, then signals end of input."""
    remaining = iter(lines)
    prompts: list[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    fake_input.prompts = prompts
    return fake_input


def _play(config: Config, lines: list[str]) -> tuple[int, str, list[str]]:
    out = io.StringIO()
    fake_input = _scripted(lines)
    status = run_console(config, input_fn=fake_input, view=ConsoleView(out))
    return status, out.getvalue(), fake_input.prompts


def test_prompts_until_valid_room_count():
    status, output, prompts = _play(
        Config(seed=1), ["zero", "-2", "4", "look", "quit"]
    )
    assert status == 0
    assert output.count("Invalid input") == 2
    assert prompts[:3] == ["Enter number of rooms: "] * 3
    assert "=== Room Description ===" in output
    assert "within 8 steps" in output


def test_configured_room_count_skips_prompt():
    _, output, prompts = _play(Config(seed=2, room_count=9), ["i", "quit"])
    assert "Enter number of rooms: " not in prompts
    assert "Inventory:" in output
    assert "GAME OVER" not in output


def test_end_of_input_exits_cleanly():
    status, output, _ = _play(Config(seed=3, room_count=4), ["help"])
    assert status == 0
    assert "open chest" in output


def test_errors_reach_the_view():
    _, output, _ = _play(Config(seed=4, room_count=4), ["fly", "quit"])
    assert "Error: Unknown command: fly" in output


def test_single_room_game_can_be_won():
    """With one room the key and chest lie where the player starts."""
    _, output, _ = _play(
        Config(seed=5, room_count=1, dark_room_chance=0),
        ["get key", "open chest", "look"],
    )
    assert "Congratulations! You found the Holy Grail!" in output
    assert "!!! GAME OVER !!!" in output
    assert GAME_OVER_MESSAGE in output


def test_non_positive_room_count_falls_back_to_prompt():
    status, output, prompts = _play(Config(seed=6, room_count=-3), ["3", "quit"])
    assert status == 0
    assert prompts[0] == "Enter number of rooms: "
    assert "within 6 steps" in output
