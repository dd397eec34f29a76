"""
Domain entities for the snake game.

This module contains the core game entities and rules that are independent
of infrastructure concerns (database, HTTP calls, terminal drawing, etc.).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS
from .errors import SnakeGameError, InvalidInput, PersistenceUnavailable, BoardFull
from .geometry import Position, is_out_of_bounds, collides_with_body, next_head
from .food import place_food
from .game_state import GameConfig, GameState, new_game_state
from .transitions import step, change_direction, toggle_pause, restart
from .events import Tick, KeyPress, Restart
from .scores import LeaderboardEntry, validate_submission, rank_entries

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE_DIRECTIONS',
    'SnakeGameError', 'InvalidInput', 'PersistenceUnavailable', 'BoardFull',
    'Position', 'is_out_of_bounds', 'collides_with_body', 'next_head',
    'place_food',
    'GameConfig', 'GameState', 'new_game_state',
    'step', 'change_direction', 'toggle_pause', 'restart',
    'Tick', 'KeyPress', 'Restart',
    'LeaderboardEntry', 'validate_submission', 'rank_entries',
]
