"""
GameConfig and GameState entities - the session settings and a snapshot of
the game at a point in time.
"""

import random
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .constants import (
    RIGHT,
    DEFAULT_GRID_SIZE,
    DEFAULT_INITIAL_SNAKE_LENGTH,
    DEFAULT_INITIAL_SPEED,
    DEFAULT_SPEED_INCREMENT,
)
from .errors import BoardFull
from .food import place_food
from .geometry import Position


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable settings for one play session.

    Attributes:
        grid_size: width and height of the square board
        initial_snake_length: number of cells the snake starts with
        initial_speed: starting speed in ticks per second
        speed_increment: speed added every time food is eaten
    """

    grid_size: int = DEFAULT_GRID_SIZE
    initial_snake_length: int = DEFAULT_INITIAL_SNAKE_LENGTH
    initial_speed: float = DEFAULT_INITIAL_SPEED
    speed_increment: float = DEFAULT_SPEED_INCREMENT

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if not 1 <= self.initial_snake_length <= self.grid_size:
            raise ValueError(
                f"initial_snake_length must be between 1 and {self.grid_size}, "
                f"got {self.initial_snake_length}"
            )
        if self.initial_speed <= 0:
            raise ValueError(f"initial_speed must be positive, got {self.initial_speed}")
        if self.speed_increment <= 0:
            raise ValueError(f"speed_increment must be positive, got {self.speed_increment}")


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    States are never edited in place: every tick or accepted input produces
    a new instance via dataclasses.replace().

    Attributes:
        snake: tuple of (x, y) from head at index 0 to tail at the end
        food: (x, y) of the food, or None once the board is full
        direction: one of UP, DOWN, LEFT, RIGHT
        score: food eaten in this game
        high_score: best score seen during the session
        is_game_over: set on collision; only a restart clears it
        is_paused: ticks are ignored while set
        speed: ticks per second
        moved_direction: direction of the last committed move, which
            reversals are judged against (None means same as direction)
    """

    snake: Tuple[Position, ...]
    food: Optional[Position]
    direction: str
    score: int
    high_score: int
    is_game_over: bool
    is_paused: bool
    speed: float
    moved_direction: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def tick_interval_ms(self) -> float:
        """Milliseconds between two ticks at the current speed."""
        return 1000.0 / self.speed

    @property
    def last_move(self) -> str:
        return self.moved_direction or self.direction

    def replace(self, **changes) -> "GameState":
        return replace(self, **changes)

    def print_board(self, grid_size: int) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body/tail
        Row 0 is printed at the top, matching the screen coordinates.
        """
        board = [['.' for _ in range(grid_size)] for _ in range(grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(grid_size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={len(self.snake)}, food={self.food}, "
            f"direction={self.direction}, score={self.score}, speed={self.speed}, "
            f"paused={self.is_paused}, over={self.is_game_over}>"
        )


def initial_snake(config: GameConfig) -> Tuple[Position, ...]:
    """Lay the snake out on the middle row, head on the right."""
    head_x = max(config.grid_size // 2, config.initial_snake_length - 1)
    y = config.grid_size // 2
    return tuple((head_x - i, y) for i in range(config.initial_snake_length))


def new_game_state(
    config: GameConfig,
    rng: Optional[random.Random] = None,
    high_score: int = 0
) -> GameState:
    """
    Build the fresh state a game starts from.

    Args:
        config: Session settings
        rng: Random source for the first food position
        high_score: Best score carried over from earlier games in the session
    """
    snake = initial_snake(config)
    try:
        food = place_food(config.grid_size, snake, rng)
    except BoardFull:
        # Only a 1x1 board can start full; the first tick ends the game
        food = None

    return GameState(
        snake=snake,
        food=food,
        direction=RIGHT,
        score=0,
        high_score=high_score,
        is_game_over=False,
        is_paused=False,
        speed=config.initial_speed,
        moved_direction=RIGHT,
    )
