"""
Events fed to a game session, processed strictly in arrival order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """The scheduler decided it is time to advance the snake one cell."""


@dataclass(frozen=True)
class KeyPress:
    """A raw key identifier delivered by the host (e.g. "ArrowUp", " ")."""

    key: str


@dataclass(frozen=True)
class Restart:
    """Throw away the current game and start a fresh one."""
