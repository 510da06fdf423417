"""Build a random dungeon: room footprint, doors, connectivity repair, items.

generate_maze(room_count, rng) -> Maze is the entry point. All randomness
comes from the rng argument so a seeded random.Random reproduces a maze.
"""

import heapq
import math
import random
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..logging import get_logger
from .state import GOLD_RANGE
from .world import Direction, Grid, Item, Room

logger = get_logger(__name__)

Position = tuple[int, int]

DEFAULT_DARK_ROOM_CHANCE = 20  # percent

# Loose items scattered on top of the key and chest. Each draw builds a
# fresh item so every gold pile gets its own amount.
ITEM_POOL: tuple[Callable[[random.Random], Item], ...] = (
    lambda rng: Item.sword(),
    lambda rng: Item.food("Apple"),
    lambda rng: Item.food("Bread"),
    lambda rng: Item.gold(rng.randint(*GOLD_RANGE)),
)


class MazeGenerationError(RuntimeError):
    """Connectivity repair failed to reach every room."""


@dataclass
class Maze:
    """A freshly generated dungeon ready to be handed to GameWorld."""

    grid: Grid
    start: Position
    steps_limit: int


def grid_size(room_count: int) -> tuple[int, int]:
    """Smallest near-square bounding box holding room_count rooms."""
    width = math.ceil(math.sqrt(room_count))
    height = math.ceil(room_count / width)
    return width, height


def _neighbors(position: Position) -> Iterable[tuple[Direction, Position]]:
    x, y = position
    for direction in Direction:
        dx, dy = direction.offset
        yield direction, (x + dx, y + dy)


def choose_footprint(
    width: int, height: int, room_count: int, rng: random.Random
) -> set[Position]:
    """Pick room_count cells forming one 4-connected blob.

    Cells are ranked by a shuffle; the first ranked cell seeds the blob and
    each step adds the best-ranked cell touching it. The shape stays as
    irregular as a plain shuffle but can never leave an island behind.
    """
    cells = [(x, y) for y in range(height) for x in range(width)]
    rng.shuffle(cells)
    rank = {cell: index for index, cell in enumerate(cells)}

    chosen: set[Position] = set()
    frontier = [(0, cells[0])]
    queued = {cells[0]}
    while frontier and len(chosen) < room_count:
        _, cell = heapq.heappop(frontier)
        chosen.add(cell)
        for _, neighbor in _neighbors(cell):
            if neighbor in rank and neighbor not in queued:
                queued.add(neighbor)
                heapq.heappush(frontier, (rank[neighbor], neighbor))
    return chosen


def _assign_doors(grid: Grid, rng: random.Random) -> None:
    """Give every room 1-4 random doors towards occupied neighbours.

    The result is neither symmetric nor necessarily connected.
    """
    for room in grid.rooms():
        candidates = [
            direction
            for direction, neighbor in _neighbors(room.position)
            if neighbor in grid
        ]
        door_count = min(rng.randint(1, 4), len(candidates))
        room.doors = rng.sample(candidates, door_count)


def repair_connectivity(grid: Grid, rng: random.Random) -> int:
    """Breadth-first pass adding doors until every room is reachable.

    Every visited room probes all four directions, not just its doors. An
    unvisited neighbour gets a door in from the current room and a door
    back, so the traversal tree is walkable both ways. Returns the number
    of doors added.
    """
    start = rng.choice(grid.coordinates())
    visited = {start}
    queue = deque([start])
    added = 0

    while queue:
        position = queue.popleft()
        room = grid.get(*position)
        for direction, neighbor_position in _neighbors(position):
            neighbor = grid.get(*neighbor_position)
            if neighbor is None or neighbor_position in visited:
                continue
            added += room.add_door(direction)
            added += neighbor.add_door(direction.opposite)
            visited.add(neighbor_position)
            queue.append(neighbor_position)

    if len(visited) != len(grid):
        raise MazeGenerationError(
            f"repair reached {len(visited)} of {len(grid)} rooms"
        )
    return added


def _pick_cell(
    rng: random.Random, cells: list[Position], exclude: Iterable[Position] = ()
) -> Position:
    """Random cell not in exclude, by rejection sampling.

    If every cell is excluded the exclusion is dropped.
    """
    excluded = set(exclude)
    if all(cell in excluded for cell in cells):
        return rng.choice(cells)
    while True:
        cell = rng.choice(cells)
        if cell not in excluded:
            return cell


def _darken_rooms(
    grid: Grid, start: Position, chance: int, rng: random.Random
) -> None:
    if chance <= 0:
        return
    for room in grid.rooms():
        if room.position == start:
            continue
        room.is_dark = chance >= 100 or rng.randint(1, 100) <= chance


def _place_items(
    grid: Grid, start: Position, room_count: int, rng: random.Random
) -> None:
    cells = grid.coordinates()

    key_position = _pick_cell(rng, cells, exclude=[start])
    if len(cells) > 2:
        chest_position = _pick_cell(rng, cells, exclude=[start, key_position])
    else:
        chest_position = _pick_cell(rng, cells, exclude=[key_position])
    grid.get(*key_position).items.append(Item.key())
    grid.get(*chest_position).items.append(Item.chest())

    for _ in range(room_count // 2):
        make_item = rng.choice(ITEM_POOL)
        position = _pick_cell(rng, cells, exclude=[start])
        grid.get(*position).items.append(make_item(rng))

    # A dark dungeon always gets at least one torch, or a key or chest in an
    # unlit room could never be picked up or opened.
    torch_count = room_count // 5
    if torch_count == 0 and any(room.is_dark for room in grid.rooms()):
        torch_count = 1
    for _ in range(torch_count):
        position = _pick_cell(rng, cells, exclude=[start])
        grid.get(*position).items.append(Item.torch())


def generate_maze(
    room_count: int,
    rng: random.Random | None = None,
    dark_room_chance: int = DEFAULT_DARK_ROOM_CHANCE,
) -> Maze:
    """Generate a fully connected dungeon of room_count rooms."""
    if room_count <= 0:
        raise ValueError(f"room_count must be positive, got {room_count}")
    rng = rng or random.Random()

    width, height = grid_size(room_count)
    grid = Grid(width=width, height=height)
    for x, y in choose_footprint(width, height, room_count, rng):
        grid.add(Room(x=x, y=y))

    _assign_doors(grid, rng)
    doors_added = repair_connectivity(grid, rng)

    start = rng.choice(grid.coordinates())
    _darken_rooms(grid, start, dark_room_chance, rng)
    _place_items(grid, start, room_count, rng)

    logger.info(
        "maze_generated",
        rooms=len(grid),
        width=width,
        height=height,
        doors_added=doors_added,
        dark_rooms=sum(room.is_dark for room in grid.rooms()),
        start=start,
    )
    return Maze(grid=grid, start=start, steps_limit=room_count * 2)
