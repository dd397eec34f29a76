"""
Error taxonomy for the snake game.
"""


class SnakeGameError(Exception):
    """Base class for all game errors."""


class InvalidInput(SnakeGameError):
    """A score submission is outside the accepted name/score range."""


class PersistenceUnavailable(SnakeGameError):
    """The score store could not be reached or failed transiently."""


class BoardFull(SnakeGameError):
    """Every cell on the board is occupied, so no food can be placed."""
