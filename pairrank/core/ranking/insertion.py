"""
insertion.py - Binary-search insertion as a pure state machine

This module handles:
- Placing pending items one at a time into an ordered sequence
- Presenting the minimum number of pairwise matchups to do so
- Whole-state snapshots for step-accurate undo

Every function takes an ``InsertionState`` and returns a new one; nothing
here mutates. ``RankingSession`` in ``session.py`` holds the live reference.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple, Union

from pairrank.utils.logging_helper import get_logger
from ..errors import NoPendingComparison, NothingToUndo
from ..models import Choice, Item, Matchup, ensure_unique

log = get_logger()

UNDO = "undo"

Event = Union[Choice, str]


@dataclass(frozen=True)
class HistoryEntry:
    """State captured at the moment a matchup was shown."""

    working_order: Tuple[Item, ...]
    pending: Tuple[Item, ...]
    search_range: Tuple[int, int]
    candidate: Item
    matchup: Matchup
    inserted_position: Optional[int]


@dataclass(frozen=True)
class InsertionState:
    """One ranking session at rest.

    ``search_range`` is the half-open ``(lo, hi)`` window of positions in
    ``working_order`` the candidate may still take.
    """

    working_order: Tuple[Item, ...] = ()
    pending: Tuple[Item, ...] = ()
    candidate: Optional[Item] = None
    search_range: Tuple[int, int] = (0, 0)
    current_matchup: Optional[Matchup] = None
    history: Tuple[HistoryEntry, ...] = ()
    total_count: int = 0
    inserted_position: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.candidate is None and not self.pending

    @property
    def processed_count(self) -> int:
        in_flight = 1 if self.candidate is not None else 0
        return self.total_count - len(self.pending) - in_flight


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def start(existing: Iterable[Item], new_items: Iterable[Item]) -> InsertionState:
    """Begin inserting ``new_items`` (in queue order) into ``existing``.

    ``existing`` must already be in rank order, highest first.

    Raises:
        DuplicateItemIdentity: an identity appears twice across both inputs
    """
    existing = tuple(existing)
    new_items = tuple(new_items)
    ensure_unique(existing + new_items, "ranking session")

    state = InsertionState(
        working_order=existing,
        pending=new_items,
        total_count=len(new_items),
    )
    if not new_items:
        log.debug("Nothing to insert into %d ranked item(s)", len(existing))
        return state

    log.debug("Inserting %d item(s) into %d ranked item(s)", len(new_items), len(existing))
    return _present_next_comparison(_take_next_candidate(state))


def _take_next_candidate(state: InsertionState) -> InsertionState:
    return replace(
        state,
        candidate=state.pending[0],
        pending=state.pending[1:],
        search_range=(0, len(state.working_order)),
    )


def _present_next_comparison(state: InsertionState) -> InsertionState:
    """Insert while the window is closed, stop at the next matchup."""
    while True:
        lo, hi = state.search_range
        if lo < hi:
            break

        candidate = state.candidate
        order = state.working_order[:lo] + (candidate,) + state.working_order[lo:]
        log.info("Inserted %s at rank position %d", candidate, lo)
        state = replace(state, working_order=order, candidate=None, inserted_position=lo)

        if not state.pending:
            log.info("Ranking complete: %d item(s) in order", len(order))
            return replace(state, search_range=(0, 0))
        state = _take_next_candidate(state)

    mid = (lo + hi) // 2
    matchup = Matchup(left=state.candidate, right=state.working_order[mid])
    entry = HistoryEntry(
        working_order=state.working_order,
        pending=state.pending,
        search_range=state.search_range,
        candidate=state.candidate,
        matchup=matchup,
        inserted_position=state.inserted_position,
    )
    log.debug("Matchup %s vs %s (window %d..%d)", matchup.left, matchup.right, lo, hi)
    return replace(state, current_matchup=matchup, history=state.history + (entry,))


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def choose(state: InsertionState, choice: Choice, strict: bool = False) -> InsertionState:
    """Answer the pending matchup.

    ``Choice.LEFT`` means the candidate beat the probed item, so the window
    shrinks to the positions above it; ``Choice.RIGHT`` keeps those below.
    Anything that is not a ``Choice`` value raises ``ValueError``.
    """
    choice = Choice(choice)
    matchup = state.current_matchup
    if matchup is None or state.candidate is None:
        if strict:
            raise NoPendingComparison()
        log.debug("Ignoring %s: no comparison pending", choice)
        return state

    mid = next(i for i, item in enumerate(state.working_order) if item == matchup.right)
    lo, hi = state.search_range
    if choice is Choice.LEFT:
        window = (lo, mid)
    else:
        window = (mid + 1, hi)

    return _present_next_comparison(replace(state, search_range=window, current_matchup=None))


def can_go_back(state: InsertionState) -> bool:
    # The first entry is the floor unless the session already ran past it.
    if state.current_matchup is None:
        return len(state.history) >= 1
    return len(state.history) > 1


def go_back(state: InsertionState, strict: bool = False) -> InsertionState:
    """Re-show the previous matchup exactly as it was first presented."""
    if not can_go_back(state):
        if strict:
            raise NothingToUndo()
        log.debug("Ignoring undo: at start of history")
        return state

    history = state.history
    if state.current_matchup is not None:
        history = history[:-1]
    entry = history[-1]
    log.debug("Undo to %s vs %s", entry.matchup.left, entry.matchup.right)
    return replace(
        state,
        working_order=entry.working_order,
        pending=entry.pending,
        candidate=entry.candidate,
        search_range=entry.search_range,
        current_matchup=entry.matchup,
        history=history,
        inserted_position=entry.inserted_position,
    )


def advance(state: InsertionState, event: Event, strict: bool = False) -> InsertionState:
    """Apply one host event: a ``Choice`` (or its string form) or ``UNDO``."""
    if event == UNDO:
        return go_back(state, strict=strict)
    if not isinstance(event, Choice):
        event = Choice.parse(event)
    return choose(state, event, strict=strict)
