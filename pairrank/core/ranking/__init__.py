"""
Ranking module - Interactive pairwise insertion ranking

This module provides:
- A pure binary-insertion state machine with whole-state undo snapshots
- Host-facing sessions for a single build or a batch of new items
"""

from .insertion import UNDO, HistoryEntry, InsertionState, advance, can_go_back, go_back, start
from .session import BatchRankingSession, RankingSession, build_ranking, start_session

__all__ = [
    'UNDO',
    'HistoryEntry',
    'InsertionState',
    'advance',
    'can_go_back',
    'go_back',
    'start',
    'BatchRankingSession',
    'RankingSession',
    'build_ranking',
    'start_session',
]
