"""Command dispatch and handler functions.

handle_command(game, raw_input) -> str is the main entry point.
It splits the input into a verb and an item name and dispatches to a
handler. Handlers call into GameWorld and return the text to show.
Failures are reported as text prefixed with "Error: ".
"""

from collections.abc import Callable

from .game import GameWorld
from .state import Outcome
from .world import Direction, ItemKind

DEATH_MESSAGE = "You died of hunger in the dragon's cave!"
VICTORY_MESSAGE = "Congratulations! You found the Holy Grail!"
GAME_OVER_MESSAGE = "The game is over."

HELP_TEXT = """\
Commands:
  n, s, w, e       walk through a door
  get <item>       pick an item up
  drop <item>      put an item down
  eat <item>       eat some food to restore health
  open chest       open the chest (you need a key)
  inventory        list what you carry
  look             describe the room again
  quit             leave the game"""

# Verbs still available when the player cannot see.
_DARK_VERBS = {"inventory", "i", "look", "l", "help"}


def _error(message: str) -> str:
    return f"Error: {message}"


def _doors_text(game: GameWorld) -> str:
    doors = game.current_room.doors
    return f"There are {len(doors)} doors: {', '.join(d.value for d in doors)}."


def describe_room(game: GameWorld) -> str:
    """Describe the current room, or only its doors when it is too dark."""
    room = game.current_room
    if not game.is_current_room_illuminated():
        return f"Can't see anything in this dark place!\n{_doors_text(game)}"

    lines = [f"You are in the room [{room.x},{room.y}]. {_doors_text(game)}"]
    if room.is_dark:
        lines.append("It is dark.")
    if room.items:
        lines.append(
            "Items in the room: " + ", ".join(item.label for item in room.items)
        )
    lines.append(f"Health: {game.player.health}%")
    return "\n".join(lines)


def get_inventory(game: GameWorld) -> list[str]:
    """Labels of the carried items, in pickup order."""
    return [item.label for item in game.player.inventory]


def _cmd_go(game: GameWorld, direction: Direction) -> str:
    game.move_player(direction)
    description = describe_room(game)
    if game.outcome is Outcome.DIED:
        return f"{description}\n\n{DEATH_MESSAGE}"
    return description


def _cmd_get(game: GameWorld, noun: str | None = None) -> str:
    """Handle GET/TAKE commands."""
    if not noun:
        return _error("Specify item to pick up")

    item = game.current_room.find_item(noun)
    if not game.pickup_item(noun):
        return _error(f"Can't pick up {noun}")

    if item.kind is ItemKind.TORCH:
        message = "You picked up a torch! Now you can explore dark places."
    elif item.kind is ItemKind.GOLD:
        message = (
            f"You picked up {item.amount} gold! "
            f"You now have {game.player.gold} coins."
        )
    else:
        message = f"You picked up {item.name}"
    return f"{message}\n\n{describe_room(game)}"


def _cmd_drop(game: GameWorld, noun: str | None = None) -> str:
    """Handle DROP commands."""
    if not noun:
        return _error("Specify item to drop")

    room = game.current_room
    item = game.player.find_item(noun)
    if not game.drop_item(noun):
        return _error(f"Can't drop {noun}")

    if item.kind is ItemKind.TORCH and room.is_dark:
        message = "You dropped the torch, illuminating the room!"
    else:
        message = f"You dropped {item.name}"
    return f"{message}\n\n{describe_room(game)}"


def _cmd_eat(game: GameWorld, noun: str | None = None) -> str:
    """Handle EAT commands."""
    if not noun:
        return _error("Specify item to eat")

    if not game.use_item(noun):
        return _error(f"You cannot eat {noun} or it's not in your inventory")
    return f"You ate {noun}. Health increased to {game.player.health}%"


def _cmd_open(game: GameWorld, noun: str | None = None) -> str:
    """Handle OPEN CHEST."""
    if noun != "chest":
        return _error("Specify what to open (e.g. 'open chest')")

    if game.open_chest():
        return VICTORY_MESSAGE
    return _error("Can't open chest. You need a key")


def _cmd_inventory(game: GameWorld, noun: str | None = None) -> str:
    items = get_inventory(game)
    lines = ["Inventory:"]
    lines.extend(items or ["(empty)"])
    if game.player.gold > 0:
        lines.append(f"Gold: {game.player.gold} coins")
    return "\n".join(lines)


def _cmd_look(game: GameWorld, noun: str | None = None) -> str:
    return describe_room(game)


def _cmd_help(game: GameWorld, noun: str | None = None) -> str:
    return HELP_TEXT


_VERB_DISPATCH: dict[str, Callable[[GameWorld, str | None], str]] = {
    **dict.fromkeys(("get", "take"), _cmd_get),
    "drop": _cmd_drop,
    "eat": _cmd_eat,
    "open": _cmd_open,
    **dict.fromkeys(("inventory", "i"), _cmd_inventory),
    **dict.fromkeys(("look", "l"), _cmd_look),
    "help": _cmd_help,
}


def handle_command(game: GameWorld, raw_input: str) -> str:
    """Process a command and return the response text."""
    if game.is_game_over:
        return GAME_OVER_MESSAGE

    words = raw_input.strip().lower().split()
    if not words:
        return _error("Empty command")

    verb = words[0]
    noun = " ".join(words[1:]) or None

    direction = Direction.parse(verb)
    if direction is not None:
        return _cmd_go(game, direction)

    handler = _VERB_DISPATCH.get(verb)
    if handler is None:
        return _error(f"Unknown command: {raw_input.strip()}")

    if verb not in _DARK_VERBS and not game.is_current_room_illuminated():
        return _error("You can't do that in the dark!")
    return handler(game, noun)
