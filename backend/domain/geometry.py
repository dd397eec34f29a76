"""
Grid geometry and collision checks.
"""

from typing import Iterable, Tuple

from .constants import DIRECTION_DELTAS

Position = Tuple[int, int]


def is_out_of_bounds(pos: Position, grid_size: int) -> bool:
    """Return True if either coordinate falls outside [0, grid_size)."""
    x, y = pos
    return x < 0 or x >= grid_size or y < 0 or y >= grid_size


def collides_with_body(pos: Position, snake_body: Iterable[Position]) -> bool:
    """Return True if pos equals any cell of snake_body."""
    return any(pos == segment for segment in snake_body)


def next_head(head: Position, direction: str) -> Position:
    dx, dy = DIRECTION_DELTAS[direction]
    return (head[0] + dx, head[1] + dy)
