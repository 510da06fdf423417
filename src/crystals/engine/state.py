"""Mutable per-game player state and balance constants."""

from dataclasses import dataclass, field
from enum import Enum

from .world import Item, ItemKind, find_item

MAX_HEALTH = 100
FOOD_HEALING = 20
MOVE_COST = 1

# Gold piles hold between 1 and 150 coins
GOLD_RANGE = (1, 150)


class Outcome(Enum):
    DIED = "died"
    VICTORY = "victory"


@dataclass
class Player:
    """The adventurer: where they stand and what they carry."""

    position: tuple[int, int] = (0, 0)
    inventory: list[Item] = field(default_factory=list)
    health: int = MAX_HEALTH
    gold: int = 0

    def find_item(self, name: str) -> Item | None:
        index = find_item(self.inventory, name)
        return None if index is None else self.inventory[index]

    def has_item_of_kind(self, kind: ItemKind) -> bool:
        return any(item.kind is kind for item in self.inventory)

    def heal(self, amount: int) -> int:
        """Raise health by amount, never past MAX_HEALTH. Returns the new health."""
        self.health = min(self.health + amount, MAX_HEALTH)
        return self.health
