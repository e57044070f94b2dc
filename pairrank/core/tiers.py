"""
tiers.py - Tier lists

Instead of a total order, each item may be dropped into one of six fixed
tiers. Tier lists belong to one person and are never collaborative.
"""

from enum import Enum
from typing import Dict, Hashable, List

from pairrank.utils.logging_helper import get_logger
from .errors import UnknownItemIdentity
from .models import Item, ensure_unique

log = get_logger()


class Tier(str, Enum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def display_name(self) -> str:
        return self.value


class TierList:
    collaborative = False

    def __init__(self, name: str, items: List[Item]) -> None:
        ensure_unique(items, f"tier list {name!r}")
        self.name = name
        self.items = list(items)
        self.assignments: Dict[Hashable, Tier] = {}

    def _require(self, item_id: Hashable) -> None:
        if all(item.id != item_id for item in self.items):
            raise UnknownItemIdentity(item_id, f"tier list {self.name!r}")

    def assign(self, item_id: Hashable, tier: Tier) -> None:
        """Put an item in ``tier``, moving it out of any tier it was in."""
        self._require(item_id)
        tier = Tier(tier)
        previous = self.assignments.get(item_id)
        self.assignments[item_id] = tier
        log.debug("%s: %r %s -> %s", self.name, item_id, previous.value if previous else "-", tier.value)

    def unassign(self, item_id: Hashable) -> None:
        self.assignments.pop(item_id, None)

    def items_in_tier(self, tier: Tier) -> List[Item]:
        return [item for item in self.items if self.assignments.get(item.id) == tier]

    def unassigned_items(self) -> List[Item]:
        return [item for item in self.items if item.id not in self.assignments]

    def add_item(self, item: Item) -> None:
        ensure_unique(self.items + [item], f"tier list {self.name!r}")
        self.items.append(item)

    def remove_item(self, item_id: Hashable) -> None:
        self._require(item_id)
        self.items = [item for item in self.items if item.id != item_id]
        self.assignments.pop(item_id, None)
