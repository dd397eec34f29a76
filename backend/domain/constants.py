"""
Game constants for the snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top-left cell, y grows downwards
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game settings
DEFAULT_GRID_SIZE = 20
DEFAULT_INITIAL_SNAKE_LENGTH = 3
DEFAULT_INITIAL_SPEED = 5.0  # ticks per second
DEFAULT_SPEED_INCREMENT = 0.5

# Score submission limits
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 20
MIN_SCORE = 0
MAX_SCORE = 1000
LEADERBOARD_SIZE = 10

# Persistence retry policy
MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0
