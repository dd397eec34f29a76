"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, OPPOSITE_DIRECTIONS
from domain.game_state import GameState
from domain.geometry import collides_with_body, is_out_of_bounds, next_head
from .base import Player

DIRECTION_KEYS = {
    UP: "ArrowUp",
    DOWN: "ArrowDown",
    LEFT: "ArrowLeft",
    RIGHT: "ArrowRight",
}


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, name: str = "Autopilot", rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def safe_moves(self, game_state: GameState, grid_size: int) -> List[str]:
        """Directions that do not end the game on the next tick."""
        valid_moves: List[str] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            if move == OPPOSITE_DIRECTIONS[game_state.last_move]:
                continue

            head = next_head(game_state.head, move)
            if is_out_of_bounds(head, grid_size):
                continue

            # Tail moves away unless we are about to eat
            growing = head == game_state.food
            body = game_state.snake if growing else game_state.snake[:-1]
            if collides_with_body(head, body):
                continue

            valid_moves.append(move)
        return valid_moves

    def get_key(self, game_state: GameState, grid_size: int) -> Optional[str]:
        valid_moves = self.safe_moves(game_state, grid_size)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        # Prefer the move that heads for the food when it is safe
        if game_state.food is not None:
            fx, fy = game_state.food
            hx, hy = game_state.head
            toward = [
                m for m in valid_moves
                if (m == RIGHT and fx > hx) or (m == LEFT and fx < hx)
                or (m == DOWN and fy > hy) or (m == UP and fy < hy)
            ]
            if toward and self.rng.random() < 0.8:
                return DIRECTION_KEYS[self.rng.choice(toward)]

        return DIRECTION_KEYS[self.rng.choice(valid_moves)]
