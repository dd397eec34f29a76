"""
Player implementations for automated play.

Players press keys through the same input router a human uses, which makes
them handy for the headless runner and for property tests.
"""

from .base import Player
from .random_player import RandomPlayer, DIRECTION_KEYS

__all__ = [
    'Player',
    'RandomPlayer',
    'DIRECTION_KEYS',
]
