"""
aggregation.py - Consensus order from several people's rankings

Positional (Borda-style) scoring: with ``n`` canonical items, a contribution
gives the item at position ``p`` a score of ``n - p``. Items a contribution
leaves out sit at position ``n - 1``. Totals are summed and sorted
descending.

Ties keep the canonical item order (``sorted`` is stable), so the same
input always yields the same output.
"""

from typing import Dict, Hashable, List, Sequence

from pairrank.utils.logging_helper import get_logger
from .errors import DuplicateItemIdentity, UnknownItemIdentity
from .models import Contribution, Item, ensure_unique

log = get_logger()


def _positions(contribution: Contribution, known: Dict[Hashable, int], n: int) -> Dict[Hashable, int]:
    positions = {}
    for index, item_id in enumerate(contribution.ranking):
        if item_id not in known:
            raise UnknownItemIdentity(item_id, f"contribution from {contribution.person_id!r}")
        if item_id in positions:
            raise DuplicateItemIdentity(item_id, f"contribution from {contribution.person_id!r}")
        positions[item_id] = index
    for item_id in known:
        positions.setdefault(item_id, n - 1)
    return positions


def score_items(
    canonical_items: Sequence[Item],
    contributions: Sequence[Contribution],
) -> Dict[Hashable, int]:
    """Total positional score per item id, in canonical order.

    Raises:
        DuplicateItemIdentity: the canonical list or one ranking repeats an id
        UnknownItemIdentity: a ranking names an id outside the canonical list
    """
    ensure_unique(canonical_items, "canonical item list")
    n = len(canonical_items)
    known = {item.id: index for index, item in enumerate(canonical_items)}
    totals = {item.id: 0 for item in canonical_items}

    for contribution in contributions:
        for item_id, position in _positions(contribution, known, n).items():
            totals[item_id] += n - position
    return totals


def aggregate(
    canonical_items: Sequence[Item],
    contributions: Sequence[Contribution],
) -> List[Item]:
    """Merge ``contributions`` into one consensus order over ``canonical_items``.

    With no contributions the canonical order comes back unchanged.
    """
    canonical_items = list(canonical_items)
    if not contributions:
        ensure_unique(canonical_items, "canonical item list")
        return canonical_items

    totals = score_items(canonical_items, contributions)
    consensus = sorted(canonical_items, key=lambda item: -totals[item.id])
    log.debug(
        "Aggregated %d contribution(s) over %d item(s): %s",
        len(contributions),
        len(canonical_items),
        ", ".join(f"{item}={totals[item.id]}" for item in consensus),
    )
    return consensus
