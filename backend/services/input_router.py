"""
Maps raw key identifiers to direction changes or the pause toggle.
"""

import logging
from typing import Dict, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from domain.transitions import change_direction, toggle_pause

logger = logging.getLogger(__name__)

TOGGLE_PAUSE = "TOGGLE_PAUSE"

# Browser-style names, curses names and WASD all map to the same commands
KEY_BINDINGS: Dict[str, str] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "KEY_UP": UP,
    "KEY_DOWN": DOWN,
    "KEY_LEFT": LEFT,
    "KEY_RIGHT": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    " ": TOGGLE_PAUSE,
    "p": TOGGLE_PAUSE,
}


class InputRouter:
    """
    Turns key events into state changes.

    Direction changes that would reverse the snake into its own neck are
    dropped. Direction changes are still accepted while the game is paused;
    once the game is over every key is ignored.
    """

    def __init__(self, bindings: Optional[Dict[str, str]] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def command_for(self, key: str) -> Optional[str]:
        """Return the direction or TOGGLE_PAUSE bound to key, or None."""
        return self.bindings.get(key)

    def route(self, state: GameState, key: str) -> GameState:
        if state.is_game_over:
            return state

        command = self.command_for(key)
        if command is None:
            logger.debug("Ignoring unbound key %r", key)
            return state
        if command == TOGGLE_PAUSE:
            return toggle_pause(state)

        updated = change_direction(state, command)
        if updated is state and command != state.direction:
            logger.debug("Rejected reversal %s while moving %s", command, state.last_move)
        return updated
