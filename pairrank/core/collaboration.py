"""
collaboration.py - Lists ranked by several people

A collaborative list keeps its canonical items in creation order and one
contribution per person. The consensus is recomputed from scratch on every
read, so it always reflects the current contributions.
"""

from typing import Dict, Hashable, List, Optional

from pairrank.utils.logging_helper import get_logger
from .aggregation import aggregate
from .errors import SessionIncomplete, UnknownItemIdentity
from .models import Contribution, Item, ensure_unique, make_items
from .ranking.session import RankingSession

log = get_logger()


class CollaborativeList:
    """Canonical items plus the latest contribution from each person."""

    def __init__(self, name: str, items: List[Item], collaborative: bool = True) -> None:
        ensure_unique(items, f"list {name!r}")
        self.name = name
        self.items = list(items)
        self.collaborative = collaborative
        self._contributions: Dict[Hashable, Contribution] = {}

    @classmethod
    def from_labels(cls, name: str, labels: List[str], collaborative: bool = True) -> "CollaborativeList":
        return cls(name, make_items(labels), collaborative=collaborative)

    @property
    def contributions(self) -> List[Contribution]:
        """Current contributions, ordered by each person's first submission."""
        return list(self._contributions.values())

    def set_collaborative(self, flag: bool) -> None:
        """Switch collaboration on or off. Switching off drops every contribution."""
        self.collaborative = flag
        if not flag and self._contributions:
            log.info("List %r no longer collaborative; cleared %d contribution(s)",
                     self.name, len(self._contributions))
            self._contributions.clear()

    def upsert_contribution(self, contribution: Contribution) -> bool:
        """Store ``contribution``, replacing any earlier one by the same person.

        Returns False without storing anything when the list is not
        collaborative.
        """
        if not self.collaborative:
            log.warning(
                "List %r is not collaborative; ignoring contribution from %r",
                self.name,
                contribution.person_id,
            )
            return False

        # fail now rather than on the next consensus read
        aggregate(self.items, [contribution])

        replaced = contribution.person_id in self._contributions
        self._contributions[contribution.person_id] = contribution
        log.info(
            "%s contribution from %r on %r (%d ranked)",
            "Replaced" if replaced else "Added",
            contribution.person_id,
            self.name,
            len(contribution.ranking),
        )
        return True

    def record_session(self, person_id: Hashable, session: RankingSession,
                       display_name: Optional[str] = None) -> bool:
        """Store a finished ranking session as ``person_id``'s contribution."""
        if not session.is_complete():
            raise SessionIncomplete(len(session.state.pending) + 1)
        return self.upsert_contribution(
            Contribution.from_order(person_id, session.result(), display_name=display_name)
        )

    def consensus(self) -> List[Item]:
        return aggregate(self.items, self.contributions)

    def add_item(self, label: str) -> Item:
        item = make_items([label])[0]
        ensure_unique(self.items + [item], f"list {self.name!r}")
        self.items.append(item)
        return item

    def remove_item(self, item_id: Hashable) -> None:
        """Drop an item and strip it from every stored ranking."""
        if all(item.id != item_id for item in self.items):
            raise UnknownItemIdentity(item_id, f"list {self.name!r}")
        self.items = [item for item in self.items if item.id != item_id]
        for person_id, contribution in self._contributions.items():
            if item_id in contribution.ranking:
                self._contributions[person_id] = Contribution(
                    person_id,
                    tuple(i for i in contribution.ranking if i != item_id),
                    updated_at=contribution.updated_at,
                    display_name=contribution.display_name,
                )
