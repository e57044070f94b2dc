"""
errors.py - Exceptions raised by the ranking core

Stray calls (choosing with nothing to compare, undoing with nothing to
undo) are no-ops unless a session runs in strict mode. Structural errors
always raise: they mean the caller handed us corrupted data.
"""

from typing import Hashable


class RankingError(Exception):
    """Base class for everything the core raises."""


class NoPendingComparison(RankingError):
    """``choose`` was called while no matchup was waiting for an answer."""

    def __init__(self) -> None:
        super().__init__("No comparison is pending")


class NothingToUndo(RankingError):
    """``go_back`` was called at the start of the history."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class SessionIncomplete(RankingError):
    """A session result was requested as a contribution before it finished."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Ranking session still has {remaining} item(s) to place")


class StructuralError(RankingError):
    """Input violates an identity invariant."""

    def __init__(self, item_id: Hashable, message: str) -> None:
        self.item_id = item_id
        super().__init__(message)


class DuplicateItemIdentity(StructuralError):
    def __init__(self, item_id: Hashable, where: str = "item list") -> None:
        super().__init__(item_id, f"Duplicate item identity {item_id!r} in {where}")


class UnknownItemIdentity(StructuralError):
    def __init__(self, item_id: Hashable, where: str = "ranking") -> None:
        super().__init__(item_id, f"Unknown item identity {item_id!r} in {where}")
