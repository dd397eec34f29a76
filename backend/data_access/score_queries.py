"""
Score query functions used by the Flask API and the CLI scripts.

These functions delegate to the ScoreRepository for actual database
operations.
"""

from typing import Any, Dict, List

import psycopg2

from domain.constants import LEADERBOARD_SIZE, MAX_RETRIES, RETRY_DELAY_SECONDS
from domain.errors import PersistenceUnavailable
from domain.scores import validate_submission
from services.retry import call_with_retries
from .repositories import ScoreRepository

# Repository instance
_score_repo = ScoreRepository()

# Connection drops and server restarts; constraint violations are not retried
TRANSIENT_DB_ERRORS = (psycopg2.OperationalError, psycopg2.InterfaceError)


def ensure_score_table() -> bool:
    """
    Create or rebuild the player_score table when needed.

    Returns:
        True if the table was (re)created
    """
    return _score_repo.ensure_schema()


def save_score(player_name: str, score: int) -> None:
    """
    Validate and store one score, retrying transient database failures.

    Args:
        player_name: Player name (2-20 characters)
        score: Final score (0-1000)

    Raises:
        InvalidInput: If the submission is out of range
        PersistenceUnavailable: If the insert still fails after all retries
    """
    player_name, score = validate_submission(player_name, score)
    try:
        inserted = call_with_retries(
            lambda: _score_repo.insert_score(player_name, score),
            retry_on=TRANSIENT_DB_ERRORS,
            max_retries=MAX_RETRIES,
            delay=RETRY_DELAY_SECONDS,
            description=f"Inserting score for {player_name}",
        )
    except TRANSIENT_DB_ERRORS as e:
        raise PersistenceUnavailable(f"Database unavailable: {e}") from e

    if not inserted:
        raise PersistenceUnavailable("Failed to save score: Database operation failed")


def get_leaderboard(limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
    """
    Retrieve the top scores.

    Args:
        limit: Maximum number of entries to return

    Returns:
        List of {player_name, score, created_at} dictionaries, highest score first
    """
    return _score_repo.get_leaderboard(limit=limit)
