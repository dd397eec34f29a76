"""
State transitions for the snake game.

Every function here takes the current GameState and returns the next one;
none of them edit a state in place. A committed tick updates snake, food,
score and speed together or not at all.
"""

import logging
import random
from typing import Optional

from .constants import OPPOSITE_DIRECTIONS, VALID_MOVES
from .errors import BoardFull
from .food import place_food
from .game_state import GameConfig, GameState, new_game_state
from .geometry import collides_with_body, is_out_of_bounds, next_head

logger = logging.getLogger(__name__)


def step(
    state: GameState,
    config: GameConfig,
    rng: Optional[random.Random] = None
) -> GameState:
    """
    Advance the game by one tick.

    1) Paused or finished games are returned unchanged
    2) Compute the new head from the current direction
    3) Check walls and the body as it will be after the move: the tail
       cell is vacated this tick unless the snake is growing
    4) Grow (score, speed, new food) or slide forward
    """
    if state.is_game_over:
        logger.debug("Ignoring tick on a finished game")
        return state
    if state.is_paused:
        return state

    head = next_head(state.head, state.direction)
    growing = state.food is not None and head == state.food
    body = state.snake if growing else state.snake[:-1]

    if is_out_of_bounds(head, config.grid_size) or collides_with_body(head, body):
        return state.replace(is_game_over=True)

    if not growing:
        return state.replace(snake=(head,) + state.snake[:-1], moved_direction=state.direction)

    # grow: keep the tail
    snake = (head,) + state.snake
    score = state.score + 1
    grown = state.replace(
        snake=snake,
        score=score,
        high_score=max(state.high_score, score),
        speed=state.speed + config.speed_increment,
        moved_direction=state.direction,
    )
    try:
        return grown.replace(food=place_food(config.grid_size, snake, rng))
    except BoardFull:
        logger.warning("Board is full after eating (score %d); ending game", score)
        return grown.replace(food=None, is_game_over=True)


def change_direction(state: GameState, direction: str) -> GameState:
    """
    Point the snake in a new direction.

    A direct reversal of the last committed move is rejected and the state
    is returned unchanged, as is any change once the game is over. Several keys
    within one tick are all judged against that same committed move.
    """
    if direction not in VALID_MOVES:
        raise ValueError(f"Unknown direction: {direction}")
    if state.is_game_over:
        return state
    if direction == state.direction or direction == OPPOSITE_DIRECTIONS[state.last_move]:
        return state
    return state.replace(direction=direction)


def toggle_pause(state: GameState) -> GameState:
    if state.is_game_over:
        return state
    return state.replace(is_paused=not state.is_paused)


def restart(
    state: GameState,
    config: GameConfig,
    rng: Optional[random.Random] = None
) -> GameState:
    """Start a brand-new game, keeping the session high score."""
    return new_game_state(config, rng, high_score=state.high_score)
