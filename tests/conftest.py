"""Shared test fixtures for Dragons & Crystals."""

import random
from collections.abc import Callable

import pytest

from crystals.engine.game import GameWorld
from crystals.engine.generator import Maze
from crystals.engine.world import Direction, Grid, Item, Room

E, W = Direction.EAST, Direction.WEST


def build_world(
    rooms: list[Room], start: tuple[int, int], width: int, height: int
) -> GameWorld:
    grid = Grid(width=width, height=height)
    for room in rooms:
        grid.add(room)
    game = GameWorld(rng=random.Random(0))
    game.load_maze(Maze(grid=grid, start=start, steps_limit=len(rooms) * 2))
    return game


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_world() -> Callable[..., GameWorld]:
    return build_world


@pytest.fixture
def game(rng: random.Random) -> GameWorld:
    world = GameWorld(rng=rng)
    world.generate_maze(16)
    return world


@pytest.fixture
def corridor() -> GameWorld:
    """Three lit rooms in a row: supplies, key, chest.

    [0,0] Apple, Gold (42), Sword  <->  [1,0] Key  <->  [2,0] Chest
    """
    return build_world(
        [
            Room(0, 0, [E], [Item.food("Apple"), Item.gold(42), Item.sword()]),
            Room(1, 0, [W, E], [Item.key()]),
            Room(2, 0, [W], [Item.chest()]),
        ],
        start=(0, 0),
        width=3,
        height=1,
    )


@pytest.fixture
def dark_corridor() -> GameWorld:
    """A lit room with a torch next to a dark room holding bread."""
    return build_world(
        [
            Room(0, 0, [E], [Item.torch()]),
            Room(1, 0, [W], [Item.food("Bread")], is_dark=True),
        ],
        start=(0, 0),
        width=2,
        height=1,
    )
