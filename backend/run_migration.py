"""
Create or migrate the player_score table.

Safe to run repeatedly: an existing table with the expected columns is left
alone, a missing or incomplete one is (re)built together with its score index.
"""

import sys

from data_access import ensure_score_table


def run_migration() -> bool:
    """Apply the player_score schema. Returns True on success."""
    try:
        print("Running migration: player_score")
        if ensure_score_table():
            print("✓ Created player_score table and idx_player_score_score index")
        else:
            print("✓ player_score table already up to date")
        print("\n✅ Migration completed successfully!")
        return True

    except Exception as e:
        print(f"\n❌ Migration failed: {e}")
        return False


if __name__ == "__main__":
    sys.exit(0 if run_migration() else 1)
