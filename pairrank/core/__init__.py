"""
Core module - Ranking logic for pairrank

This module contains the core functionality organized by domain:
- models: Items, matchups, choices and contributions
- ranking: Interactive binary-insertion sessions with undo
- aggregation: Consensus order from several contributions
- collaboration: Lists ranked by several people
- tiers: Tier lists
"""

from .aggregation import aggregate, score_items
from .collaboration import CollaborativeList
from .errors import (
    DuplicateItemIdentity,
    NoPendingComparison,
    NothingToUndo,
    RankingError,
    SessionIncomplete,
    StructuralError,
    UnknownItemIdentity,
)
from .models import Choice, Contribution, Item, Matchup, make_items
from .ranking import BatchRankingSession, RankingSession, build_ranking, start_session
from .tiers import Tier, TierList

__all__ = [
    'aggregate',
    'score_items',
    'CollaborativeList',
    'DuplicateItemIdentity',
    'NoPendingComparison',
    'NothingToUndo',
    'RankingError',
    'SessionIncomplete',
    'StructuralError',
    'UnknownItemIdentity',
    'Choice',
    'Contribution',
    'Item',
    'Matchup',
    'make_items',
    'BatchRankingSession',
    'RankingSession',
    'build_ranking',
    'start_session',
    'Tier',
    'TierList',
]
