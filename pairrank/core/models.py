"""
models.py - Value types shared by the ranker and the aggregator

Items are compared by identity only; the label is for display.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from pairrank.utils.text_processing import clean_label
from .errors import DuplicateItemIdentity


@dataclass(frozen=True)
class Item:
    id: Hashable
    label: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.label or str(self.id)


@dataclass(frozen=True)
class Matchup:
    """A left/right pair awaiting one preference judgment."""

    left: Item
    right: Item

    def __post_init__(self) -> None:
        if self.left == self.right:
            raise ValueError(f"An item cannot be compared with itself: {self.left.id!r}")


class Choice(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, text: str) -> "Choice":
        """Accept ``left``/``right`` or their first letter, any case."""
        key = text.strip().lower()
        for choice in cls:
            if key in (choice.value, choice.value[0]):
                return choice
        raise ValueError(f"Not a choice: {text!r} (expected left or right)")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Contribution:
    """One person's full or partial ordering of a shared item set.

    ``ranking`` holds item identities, highest rank first. Contributions are
    never edited; a person re-submits and the old one is replaced.
    """

    person_id: Hashable
    ranking: Tuple[Hashable, ...]
    updated_at: datetime = field(default_factory=_now)
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        # accept any iterable, store a tuple
        object.__setattr__(self, "ranking", tuple(self.ranking))

    @classmethod
    def from_order(
        cls,
        person_id: Hashable,
        items: Iterable[Item],
        display_name: Optional[str] = None,
    ) -> "Contribution":
        return cls(person_id, tuple(item.id for item in items), display_name=display_name)


def make_items(labels: Iterable[str]) -> List[Item]:
    """Build items whose identity is the cleaned label.

    Raises:
        DuplicateItemIdentity: two labels clean to the same string
    """
    items = []
    seen = set()
    for raw in labels:
        label = clean_label(raw)
        if label in seen:
            raise DuplicateItemIdentity(label, "labels")
        seen.add(label)
        items.append(Item(label, label))
    return items


def ensure_unique(items: Sequence[Item], where: str = "item list") -> None:
    """Raise on the first identity that appears twice in ``items``."""
    seen = set()
    for item in items:
        if item.id in seen:
            raise DuplicateItemIdentity(item.id, where)
        seen.add(item.id)
