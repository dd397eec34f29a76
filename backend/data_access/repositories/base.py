"""
Base repository with connection management.

Every unit of work gets its own connection:
- commit when the block exits cleanly
- rollback and re-raise when it does not
- cursor and connection closed in all cases
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Sequence

from database_postgres import get_connection

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses use self.connection() for writes and the fetch helpers for
    plain reads.
    """

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager yielding (connection, cursor).

        Args:
            auto_commit: Commit on clean exit. Pass False for read-only work.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("DELETE FROM player_score WHERE score < %s", (10,))
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception as e:
            logger.error(f"Rolling back transaction: {e}")
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def fetch_all(self, query: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Run a read query and return every row as a dict."""
        with self.connection(auto_commit=False) as (conn, cursor):
            cursor.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]
