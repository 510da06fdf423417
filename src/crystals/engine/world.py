"""Data structures for the dungeon: directions, items, rooms and the grid.

The grid is built once per game by the generator and afterwards only
changes through item placement and removal.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

# A room never has more doors than there are cardinal directions.
MAX_DOORS = 4


class Direction(Enum):
    """A cardinal direction, valued by its command letter."""

    NORTH = "N"
    SOUTH = "S"
    WEST = "W"
    EAST = "E"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) step; north decreases y."""
        return _OFFSETS[self]

    @classmethod
    def parse(cls, text: str) -> "Direction | None":
        """Direction from a letter or full name ("n", "North"), else None."""
        word = text.strip().upper()
        if word in cls.__members__:
            return cls[word]
        try:
            return cls(word)
        except ValueError:
            return None


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}


class ItemKind(Enum):
    KEY = "key"
    CHEST = "chest"
    TORCH = "torch"
    FOOD = "food"
    SWORD = "sword"
    GOLD = "gold"


@dataclass(frozen=True, eq=False)
class Item:
    """An item lying in a room or carried by the player.

    Identity is the case-folded name alone: two items called "Gold" are the
    same inventory slot whatever their kind or amount.
    """

    name: str
    kind: ItemKind
    amount: int = 0  # only meaningful for gold

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"item amount must be non-negative, got {self.amount}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name.casefold() == other.name.casefold()

    def __hash__(self) -> int:
        return hash(self.name.casefold())

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()

    @property
    def label(self) -> str:
        if self.kind is ItemKind.GOLD:
            return f"{self.name} ({self.amount} coins)"
        return self.name

    @classmethod
    def key(cls) -> "Item":
        return cls("Key", ItemKind.KEY)

    @classmethod
    def chest(cls) -> "Item":
        return cls("Chest", ItemKind.CHEST)

    @classmethod
    def torch(cls) -> "Item":
        return cls("Torch", ItemKind.TORCH)

    @classmethod
    def sword(cls) -> "Item":
        return cls("Sword", ItemKind.SWORD)

    @classmethod
    def food(cls, name: str) -> "Item":
        return cls(name, ItemKind.FOOD)

    @classmethod
    def gold(cls, amount: int) -> "Item":
        return cls("Gold", ItemKind.GOLD, amount)


def find_item(items: list[Item], name: str) -> int | None:
    """Index of the first item matching name (case-insensitive), else None."""
    for index, item in enumerate(items):
        if item.matches(name):
            return index
    return None


@dataclass
class Room:
    """A location on the grid."""

    x: int
    y: int
    doors: list[Direction] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    is_dark: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def has_door(self, direction: Direction) -> bool:
        return direction in self.doors

    def add_door(self, direction: Direction) -> bool:
        """Add a door unless it exists or the room is full. Returns True if added."""
        if direction in self.doors or len(self.doors) >= MAX_DOORS:
            return False
        self.doors.append(direction)
        return True

    def find_item(self, name: str) -> Item | None:
        index = find_item(self.items, name)
        return None if index is None else self.items[index]

    def has_item_of_kind(self, kind: ItemKind) -> bool:
        return any(item.kind is kind for item in self.items)

    @property
    def is_illuminated(self) -> bool:
        """Lit rooms are always visible; dark ones only with a torch on the floor."""
        return not self.is_dark or self.has_item_of_kind(ItemKind.TORCH)


@dataclass
class Grid:
    """Sparse width x height grid of rooms keyed by (x, y).

    Cells without a room are simply absent; lookups return None rather than
    raising, whether the cell is empty or out of bounds.
    """

    width: int = 0
    height: int = 0
    rooms_by_position: dict[tuple[int, int], Room] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rooms_by_position)

    def __contains__(self, position: object) -> bool:
        return position in self.rooms_by_position

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Room | None:
        return self.rooms_by_position.get((x, y))

    def add(self, room: Room) -> None:
        if not self.in_bounds(room.x, room.y):
            raise ValueError(
                f"room ({room.x}, {room.y}) outside {self.width}x{self.height} grid"
            )
        self.rooms_by_position[room.position] = room

    def neighbor_position(
        self, x: int, y: int, direction: Direction
    ) -> tuple[int, int]:
        dx, dy = direction.offset
        return (x + dx, y + dy)

    def neighbor(self, room: Room, direction: Direction) -> Room | None:
        return self.get(*self.neighbor_position(room.x, room.y, direction))

    def coordinates(self) -> list[tuple[int, int]]:
        """Occupied positions in row-major order."""
        return sorted(self.rooms_by_position, key=lambda pos: (pos[1], pos[0]))

    def rooms(self) -> Iterator[Room]:
        for position in self.coordinates():
            yield self.rooms_by_position[position]
