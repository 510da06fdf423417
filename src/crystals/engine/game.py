"""The game world engine.

GameWorld owns the grid and the player. Every mutator either applies fully
or leaves the world untouched, and none of them acts once the game is over.
User-level failures come back as False (or a silent no-op for movement);
only a broken internal invariant raises.
"""

import random

from ..logging import get_logger
from .generator import DEFAULT_DARK_ROOM_CHANCE, Maze, generate_maze
from .state import FOOD_HEALING, MOVE_COST, Outcome, Player
from .world import Direction, Grid, ItemKind, Room, find_item

logger = get_logger(__name__)


class InvariantViolation(RuntimeError):
    """The player stands somewhere that is not a room."""


class GameWorld:
    """A single game session: one grid, one player."""

    def __init__(
        self,
        rng: random.Random | None = None,
        dark_room_chance: int = DEFAULT_DARK_ROOM_CHANCE,
    ):
        self.rng = rng or random.Random()
        self.dark_room_chance = dark_room_chance
        self._grid = Grid()
        self._player = Player()
        self._steps_limit = 0
        self._outcome: Outcome | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def player(self) -> Player:
        return self._player

    @property
    def steps_limit(self) -> int:
        """Advisory number of moves the dungeon is balanced around."""
        return self._steps_limit

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self._outcome is not None

    @property
    def current_room(self) -> Room:
        room = self._grid.get(*self._player.position)
        if room is None:
            raise InvariantViolation(
                f"player at {self._player.position} is not in a room"
            )
        return room

    def is_current_room_illuminated(self) -> bool:
        return self.current_room.is_illuminated or self._player.has_item_of_kind(
            ItemKind.TORCH
        )

    def generate_maze(self, room_count: int) -> None:
        """Replace the dungeon with a new one and reset the player."""
        self.load_maze(generate_maze(room_count, self.rng, self.dark_room_chance))

    def load_maze(self, maze: Maze) -> None:
        """Start a game on an already built maze."""
        if maze.grid.get(*maze.start) is None:
            raise InvariantViolation(f"start {maze.start} is not a room")
        self._grid = maze.grid
        self._player = Player(position=maze.start)
        self._steps_limit = maze.steps_limit
        self._outcome = None

    def move_player(self, direction: Direction) -> None:
        if self.is_game_over:
            return
        room = self.current_room
        if not room.has_door(direction):
            return

        target = self._grid.neighbor(room, direction)
        if target is None:
            return

        x, y = target.position
        self._player.position = (x, y)
        self._player.health -= MOVE_COST
        logger.debug(
            "player_moved",
            direction=direction.name,
            position=(x, y),
            health=self._player.health,
        )

        if self._player.health <= 0:
            self._outcome = Outcome.DIED
            logger.info("player_died", position=(x, y))

    def pickup_item(self, name: str) -> bool:
        if self.is_game_over:
            return False
        room = self.current_room
        index = find_item(room.items, name)
        if index is None:
            return False

        item = room.items[index]
        if item.kind is ItemKind.CHEST:
            # Chests are opened where they stand, never carried.
            return False

        del room.items[index]
        if item.kind is ItemKind.GOLD:
            self._player.gold += item.amount
            logger.debug("gold_collected", amount=item.amount, total=self._player.gold)
        else:
            self._player.inventory.append(item)
            logger.debug("item_picked_up", item=item.name, position=room.position)
        return True

    def drop_item(self, name: str) -> bool:
        if self.is_game_over:
            return False
        room = self.current_room
        index = find_item(self._player.inventory, name)
        if index is None:
            return False

        item = self._player.inventory.pop(index)
        room.items.append(item)
        logger.debug("item_dropped", item=item.name, position=room.position)
        return True

    def use_item(self, name: str) -> bool:
        """Eat a food item from the inventory. Anything else is left alone."""
        if self.is_game_over:
            return False
        index = find_item(self._player.inventory, name)
        if index is None:
            return False

        item = self._player.inventory[index]
        if item.kind is not ItemKind.FOOD:
            return False

        del self._player.inventory[index]
        health = self._player.heal(FOOD_HEALING)
        logger.debug("item_used", item=item.name, health=health)
        return True

    def open_chest(self) -> bool:
        if self.is_game_over:
            return False
        room = self.current_room
        if not room.has_item_of_kind(ItemKind.CHEST):
            return False
        if not self._player.has_item_of_kind(ItemKind.KEY):
            return False

        self._outcome = Outcome.VICTORY
        logger.info("chest_opened", position=room.position, gold=self._player.gold)
        return True
