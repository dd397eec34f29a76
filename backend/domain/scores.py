"""
Score submission rules and leaderboard ordering.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .constants import (
    LEADERBOARD_SIZE,
    MAX_NAME_LENGTH,
    MAX_SCORE,
    MIN_NAME_LENGTH,
    MIN_SCORE,
)
from .errors import InvalidInput


@dataclass(frozen=True)
class LeaderboardEntry:
    """
    One row of the leaderboard.

    Attributes:
        name: player name as submitted
        score: final score of the game
        timestamp: when the score was stored (None if the store did not say)
    """

    name: str
    score: int
    timestamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'player_name': self.name,
            'score': self.score,
            'created_at': self.timestamp.isoformat() if self.timestamp else None,
        }


def validate_submission(name: Any, score: Any) -> Tuple[str, int]:
    """
    Check a (name, score) pair against the submission limits.

    Args:
        name: Player name, 2-20 characters once surrounding whitespace is stripped
        score: Whole-number score between 0 and 1000 inclusive; JSON floats
            such as 5.0 are accepted and returned as int

    Returns:
        The cleaned (name, score) pair

    Raises:
        InvalidInput: If either value is missing, mistyped or out of range
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("Invalid input: player name is required")
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    # bool is an int subclass but never a valid score
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidInput("Invalid input: score must be an integer")

    name = name.strip()
    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        raise InvalidInput(
            f"Player name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters"
        )
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidInput(f"Score must be between {MIN_SCORE} and {MAX_SCORE}")

    return name, score


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Accept a datetime, an ISO-8601 string or None."""
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


def entry_from_row(row: Dict[str, Any]) -> LeaderboardEntry:
    """Build an entry from a player_score row or its JSON form."""
    return LeaderboardEntry(
        name=row['player_name'],
        score=int(row['score']),
        timestamp=parse_timestamp(row.get('created_at')),
    )


def rank_entries(
    entries: Iterable[LeaderboardEntry],
    limit: int = LEADERBOARD_SIZE
) -> List[LeaderboardEntry]:
    """
    Order entries by score, highest first, and keep the top `limit`.

    Equal scores keep the older entry first; entries without a timestamp
    keep their incoming order after the timestamped ones.
    """
    indexed = list(enumerate(entries))
    indexed.sort(key=lambda pair: (
        -pair[1].score,
        pair[1].timestamp is None,
        pair[1].timestamp.timestamp() if pair[1].timestamp else 0.0,
        pair[0],
    ))
    return [entry for _, entry in indexed[:limit]]
