"""
Data access layer for score persistence.

This module provides functions for creating the player_score table,
storing finished games and reading the leaderboard.
"""

from .score_queries import ensure_score_table, save_score, get_leaderboard

__all__ = [
    'ensure_score_table',
    'save_score',
    'get_leaderboard',
]
