"""
Food placement.
"""

import random
from typing import Collection, Optional

from .errors import BoardFull
from .geometry import Position, is_out_of_bounds


def place_food(
    grid_size: int,
    occupied_cells: Collection[Position],
    rng: Optional[random.Random] = None
) -> Position:
    """
    Pick a cell uniformly at random among the cells not in occupied_cells.

    Candidates are drawn and redrawn until a free one turns up. A full board
    is detected up front, so the loop always has at least one free cell to
    find.

    Args:
        grid_size: Width and height of the square board
        occupied_cells: Cells covered by the snake
        rng: Random source (defaults to the module-level generator)

    Returns:
        A free (x, y) cell

    Raises:
        BoardFull: If occupied_cells covers the whole board
    """
    rng = rng or random
    occupied = {cell for cell in occupied_cells if not is_out_of_bounds(cell, grid_size)}
    if len(occupied) >= grid_size * grid_size:
        raise BoardFull(f"No free cell left on a {grid_size}x{grid_size} board")

    while True:
        x = rng.randrange(grid_size)
        y = rng.randrange(grid_size)
        if (x, y) not in occupied:
            return (x, y)
