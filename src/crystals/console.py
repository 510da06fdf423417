"""Console front end: display sink and read-eval loop."""

import random
import sys
from collections.abc import Callable
from typing import Protocol, TextIO

import structlog

from .config import Config
from .engine.commands import GAME_OVER_MESSAGE, describe_room, handle_command
from .engine.game import GameWorld
from .engine.state import Outcome
from .logging import get_logger

logger = get_logger(__name__)

WELCOME = """\
Welcome to Dragons & Crystals!

To show inventory type: inventory
To heal you need to eat, type 'eat' followed by the name of an item
You can also use get, drop and open commands; type 'help' for the full list
"""

QUIT_WORDS = {"quit", "exit", "q"}


class GameView(Protocol):
    def display_room_description(self, description: str) -> None: ...

    def display_text(self, text: str) -> None: ...

    def display_error(self, message: str) -> None: ...

    def display_game_over(self, message: str) -> None: ...


class ConsoleView:
    """Writes game output to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def display_room_description(self, description: str) -> None:
        self._print("\n=== Room Description ===")
        self._print(description)
        self._print("========================")

    def display_text(self, text: str) -> None:
        self._print(text)

    def display_error(self, message: str) -> None:
        self._print(message)

    def display_game_over(self, message: str) -> None:
        self._print("\n!!! GAME OVER !!!")
        self._print(message)


def _ask_room_count(input_fn: Callable[[str], str], view: GameView) -> int:
    while True:
        raw = input_fn("Enter number of rooms: ")
        try:
            room_count = int(raw.strip())
        except ValueError:
            room_count = 0
        if room_count > 0:
            return room_count
        view.display_error("Invalid input. Please enter a positive number.")


def _show(view: GameView, response: str) -> None:
    if response.startswith("Error: "):
        view.display_error(response)
    else:
        view.display_text(response)


def _game_over_message(game: GameWorld) -> str:
    if game.outcome is Outcome.VICTORY:
        return f"You won with {game.player.gold} gold."
    return f"You ran out of strength with {game.player.gold} gold."


def _play(
    game: GameWorld,
    config: Config,
    input_fn: Callable[[str], str],
    view: GameView,
) -> None:
    room_count = config.room_count
    if room_count is None or room_count <= 0:
        room_count = _ask_room_count(input_fn, view)
    game.generate_maze(room_count)
    logger.info("game_started", room_count=room_count, steps_limit=game.steps_limit)
    view.display_text(f"Try to find the chest within {game.steps_limit} steps.")
    view.display_room_description(describe_room(game))

    while not game.is_game_over:
        command = input_fn("\n> ")
        if command.strip().lower() in QUIT_WORDS:
            logger.info("game_quit", health=game.player.health)
            return
        _show(view, handle_command(game, command))


def run_console(
    config: Config,
    input_fn: Callable[[str], str] = input,
    view: GameView | None = None,
) -> int:
    """Play one game on the console. Returns the process exit status."""
    view = view or ConsoleView()
    rng = random.Random(config.seed) if config.seed is not None else None
    game = GameWorld(rng=rng, dark_room_chance=config.dark_room_chance)

    view.display_text(WELCOME)
    with structlog.contextvars.bound_contextvars(seed=config.seed):
        try:
            _play(game, config, input_fn, view)
        except (EOFError, KeyboardInterrupt):
            logger.info("input_closed")
            view.display_text("")

        if game.is_game_over:
            view.display_game_over(
                f"{_game_over_message(game)}\n{GAME_OVER_MESSAGE}"
            )
            logger.info(
                "game_finished", outcome=game.outcome.value, gold=game.player.gold
            )
    return 0
