"""
Tick scheduler that turns a high-frequency clock callback into game ticks.

The host calls poll() as often as it likes (every frame, every timer
callback). A tick is due once 1000 / speed milliseconds have passed since
the last committed tick, so the simulation rate follows the snake's speed
and not the host's callback rate.

Pause policy: while the game is paused or over, the baseline follows the
clock. Resuming therefore waits one full interval before the next tick
instead of firing a catch-up tick straight away.
"""

import logging
from typing import Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Decides when the next tick is due.

    Attributes:
        last_tick_ms: clock value of the last committed tick (None before the first poll)
        ticks: number of ticks committed so far
        attached: False once stop() has been called
    """

    def __init__(self):
        self.last_tick_ms: Optional[float] = None
        self.ticks = 0
        self.attached = True

    def poll(self, now_ms: float, state: GameState) -> bool:
        """
        Return True if exactly one tick should be committed at now_ms.

        The first poll only sets the baseline. A True result records now_ms
        as the new baseline, so the caller must apply the tick it was given.
        """
        if not self.attached:
            return False

        if self.last_tick_ms is None or now_ms < self.last_tick_ms:
            # First poll, or a clock that went backwards: start over from here
            self.last_tick_ms = now_ms
            return False

        if state.is_paused or state.is_game_over:
            self.last_tick_ms = now_ms
            return False

        if now_ms - self.last_tick_ms < state.tick_interval_ms:
            return False

        self.last_tick_ms = now_ms
        self.ticks += 1
        return True

    def reset(self, now_ms: Optional[float] = None) -> None:
        """Start a fresh baseline, e.g. after a restart."""
        self.last_tick_ms = now_ms
        self.ticks = 0

    def stop(self) -> None:
        """Detach from the clock; later polls never tick."""
        if self.attached:
            logger.debug("Tick scheduler detached after %d ticks", self.ticks)
        self.attached = False
