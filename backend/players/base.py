"""
Base player interface for automated play.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current state and answers with the key it would
    press, exactly like a person at the keyboard would.
    """

    def __init__(self, name: str):
        self.name = name

    def get_key(self, game_state: GameState, grid_size: int) -> Optional[str]:
        """
        Return the key to press for the current game state.

        Args:
            game_state: Current state of the game
            grid_size: Width and height of the board

        Returns:
            A key identifier understood by the input router, or None to press nothing
        """
        raise NotImplementedError
