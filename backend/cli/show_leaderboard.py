#!/usr/bin/env python3
"""
Print the leaderboard straight from the database.

Usage:
    python backend/cli/show_leaderboard.py [--limit N]
"""

import os
import sys
import argparse

# Add parent directory to path to import database modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv  # noqa: E402

from data_access import get_leaderboard  # noqa: E402
from domain.constants import LEADERBOARD_SIZE  # noqa: E402
from domain.scores import entry_from_row  # noqa: E402


def show_leaderboard(limit: int = LEADERBOARD_SIZE) -> bool:
    """
    Print the top `limit` scores.

    Returns:
        True if the leaderboard could be read, False otherwise
    """
    try:
        entries = [entry_from_row(row) for row in get_leaderboard(limit=limit)]
    except Exception as e:
        print(f"❌ Error reading leaderboard: {e}")
        return False

    print("=" * 50)
    print(f"{'#':>3}  {'Player':<20} {'Score':>6}  Saved at")
    print("=" * 50)
    if not entries:
        print("  No scores yet")
    for rank, entry in enumerate(entries, start=1):
        saved_at = entry.timestamp.strftime("%Y-%m-%d %H:%M") if entry.timestamp else "-"
        print(f"{rank:>3}  {entry.name:<20} {entry.score:>6}  {saved_at}")
    print("=" * 50)
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Print the score leaderboard"
    )
    parser.add_argument(
        '--limit',
        type=int,
        default=LEADERBOARD_SIZE,
        help="Number of entries to show"
    )

    args = parser.parse_args()
    load_dotenv()

    success = show_leaderboard(limit=args.limit)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
