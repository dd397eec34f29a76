"""
Score repository for player_score table operations.
"""

import logging
from typing import Any, Dict, List

from domain.constants import LEADERBOARD_SIZE
from .base import BaseRepository

logger = logging.getLogger(__name__)

TABLE_NAME = "player_score"
EXPECTED_COLUMNS = {"id", "player_name", "score", "created_at"}


class ScoreRepository(BaseRepository):
    """
    Repository for the player_score table.
    """

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------

    def get_columns(self) -> List[str]:
        """Return the column names player_score currently has (empty if missing)."""
        rows = self.fetch_all("""
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_name = %s
        """, (TABLE_NAME,))
        return [row['column_name'] for row in rows]

    def ensure_schema(self) -> bool:
        """
        Create player_score, or rebuild it if its structure is incomplete.

        Returns:
            True if the table was (re)created, False if it was already fine
        """
        columns = set(self.get_columns())
        if EXPECTED_COLUMNS.issubset(columns):
            return False

        logger.warning(
            f"Table {TABLE_NAME} is missing or incomplete (columns: {sorted(columns)}); recreating"
        )
        with self.connection() as (conn, cursor):
            cursor.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
            cursor.execute(f"""
                CREATE TABLE {TABLE_NAME} (
                    id SERIAL PRIMARY KEY,
                    player_name VARCHAR(50) NOT NULL,
                    score INTEGER NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            cursor.execute(
                f"CREATE INDEX idx_player_score_score ON {TABLE_NAME}(score DESC)"
            )
        logger.info(f"Created table {TABLE_NAME}")
        return True

    # -------------------------------------------------------------------------
    # Scores
    # -------------------------------------------------------------------------

    def insert_score(self, player_name: str, score: int) -> bool:
        """
        Insert one score row.

        Args:
            player_name: Validated player name
            score: Validated score

        Returns:
            True if exactly one row was written
        """
        with self.connection() as (conn, cursor):
            cursor.execute(
                f"INSERT INTO {TABLE_NAME} (player_name, score) VALUES (%s, %s)",
                (player_name, score)
            )
            inserted = cursor.rowcount == 1
        logger.info(f"Inserted score {score} for {player_name} (ok={inserted})")
        return inserted

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
        """
        Return the best scores, highest first; equal scores oldest first.

        Args:
            limit: Maximum number of rows to return
        """
        return self.fetch_all(f"""
            SELECT player_name, score, created_at
            FROM {TABLE_NAME}
            ORDER BY score DESC, created_at ASC
            LIMIT %s
        """, (limit,))
