"""
session.py - Host-facing ranking sessions

A session owns the single live ``InsertionState`` and swaps it for the next
one on every call. Hosts ask for the current matchup, feed back a choice,
and read ``result()`` once ``is_complete()`` turns true.
"""

from typing import Iterable, List, Optional, Sequence

from pairrank.utils.paths import env_flag
from ..models import Choice, Item, Matchup
from . import insertion
from .insertion import InsertionState


class RankingSession:
    """Interactive insertion ranker with undo."""

    def __init__(self, state: InsertionState, strict: Optional[bool] = None) -> None:
        self.state = state
        self.strict = env_flag("PAIRRANK_STRICT") if strict is None else strict

    def current_matchup(self) -> Optional[Matchup]:
        return self.state.current_matchup

    def choose(self, choice: Choice) -> None:
        self.state = insertion.advance(self.state, choice, strict=self.strict)

    def can_go_back(self) -> bool:
        return insertion.can_go_back(self.state)

    def go_back(self) -> None:
        self.state = insertion.go_back(self.state, strict=self.strict)

    def is_complete(self) -> bool:
        return self.state.is_complete

    def result(self) -> List[Item]:
        """The order built so far; final once the session is complete."""
        return list(self.state.working_order)

    def inserted_position(self) -> Optional[int]:
        """Rank position the most recently placed item landed at."""
        return self.state.inserted_position


class BatchRankingSession(RankingSession):
    """Inserts a whole queue of new items, reporting progress across it."""

    def processed_count(self) -> int:
        return self.state.processed_count

    def total_count(self) -> int:
        return self.state.total_count


def start_session(
    existing_order: Iterable[Item],
    new_items: Iterable[Item],
    strict: Optional[bool] = None,
) -> BatchRankingSession:
    """Insert ``new_items`` into an already-ranked ``existing_order``."""
    return BatchRankingSession(insertion.start(existing_order, new_items), strict=strict)


def build_ranking(items: Sequence[Item], strict: Optional[bool] = None) -> RankingSession:
    """Rank ``items`` from scratch: the first one seeds the order."""
    items = list(items)
    return RankingSession(insertion.start(items[:1], items[1:]), strict=strict)
