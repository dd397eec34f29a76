#!/usr/bin/env python3
"""
Play the snake game in a terminal.

Arrow keys or WASD steer, space or P pauses, R starts a new game once the
current one is over, Q quits.

Usage:
    python backend/cli/play.py --name NAME [--offline] [--api-url URL]
"""

import curses
import os
import sys
import time
from typing import List

# Add parent directory to path to import game modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

FRAME_SECONDS = 1 / 60
QUIT_KEYS = {"q", "Q"}
RESTART_KEYS = {"r", "R"}


def _status_lines(game) -> List[str]:
    state = game.state
    lines = [f"Player: {game.player_name}   Score: {state.score}   High score: {state.high_score}"]
    if state.is_game_over:
        lines.append("GAME OVER - press R to restart, Q to quit")
        result = game.last_report()
        if game.game_id in game.pending_reports:
            lines.append("Saving score...")
        elif result is not None and not result.saved:
            lines.append(f"Score not saved: {result.error}")
    elif state.is_paused:
        lines.append("Paused - press space to resume")
    else:
        lines.append("Arrows/WASD to steer, space to pause")

    if game.reporter is not None and game.reporter.leaderboard:
        lines.append("")
        lines.append("Leaderboard")
        for rank, entry in enumerate(game.reporter.leaderboard, start=1):
            lines.append(f"{rank:2d}. {entry.name:<20} {entry.score:>5}")
    return lines


def _draw(screen, game) -> None:
    screen.erase()
    board = game.state.print_board(game.config.grid_size).split("\n")
    for row, line in enumerate(board + [""] + _status_lines(game)):
        try:
            screen.addstr(row, 0, line)
        except curses.error:
            # Terminal too small for the whole frame; draw what fits
            break
    screen.refresh()


def _loop(screen, game) -> None:
    curses.curs_set(0)
    screen.nodelay(True)
    screen.keypad(True)

    while True:
        key = screen.getch()
        while key != -1:
            name = curses.keyname(key).decode() if key > 255 else chr(key)
            if name in QUIT_KEYS:
                return
            if name in RESTART_KEYS and game.state.is_game_over:
                game.request_restart()
            else:
                game.press_key(name)
            key = screen.getch()

        game.clock(time.monotonic() * 1000)
        _draw(screen, game)
        time.sleep(FRAME_SECONDS)


def run_terminal(game) -> None:
    """Drive game from the terminal until the player quits."""
    try:
        curses.wrapper(_loop, game)
    finally:
        game.stop()


if __name__ == "__main__":
    from main import main

    main()
