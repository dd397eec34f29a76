"""
Score stores used by the game: an HTTP client for the score API and an
in-memory store for offline play.

Both validate submissions locally, so an out-of-range name or score never
leaves the process.
"""

import logging
import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from domain.constants import LEADERBOARD_SIZE
from domain.errors import InvalidInput, PersistenceUnavailable
from domain.scores import LeaderboardEntry, entry_from_row, rank_entries, validate_submission

logger = logging.getLogger(__name__)

DEFAULT_SCORE_API_URL = "http://localhost:5000"
SAVE_SCORE_PATH = "/api/save-score"


class ScoreStore:
    """
    A common interface for score persistence.
    """

    def save_score(self, name: str, score: int) -> None:
        """
        Persist one finished game.

        Raises:
            InvalidInput: If name or score is out of range
            PersistenceUnavailable: If the store failed transiently
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
        """Return up to `limit` entries, highest score first."""
        raise NotImplementedError("Subclasses should implement this method.")


class ScoreApiClient(ScoreStore):
    """
    Talks to the Flask score API (see app.py) over HTTP.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10):
        base_url = base_url or os.getenv("SCORE_API_URL") or DEFAULT_SCORE_API_URL
        self.url = base_url.rstrip("/") + SAVE_SCORE_PATH
        self.timeout = timeout
        self.session = requests.Session()

    def save_score(self, name: str, score: int) -> None:
        name, score = validate_submission(name, score)

        try:
            response = self.session.post(
                self.url,
                json={"playerName": name, "score": score},
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        except requests.exceptions.RequestException as e:
            raise PersistenceUnavailable(f"Could not reach score API at {self.url}: {e}") from e

        if 400 <= response.status_code < 500:
            raise InvalidInput(self._error_message(response))
        if response.status_code >= 500:
            raise PersistenceUnavailable(
                f"Score API returned {response.status_code}: {self._error_message(response)}"
            )

        logger.info(f"Saved score {score} for {name}")

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise PersistenceUnavailable(f"Could not fetch leaderboard from {self.url}: {e}") from e

        # Accept both a bare list and a {"rows": [...]} envelope
        rows = payload.get("rows", []) if isinstance(payload, dict) else payload
        try:
            entries = [entry_from_row(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceUnavailable(f"Malformed leaderboard from {self.url}: {e!r}") from e
        return rank_entries(entries, limit)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body: Dict[str, Any] = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        return body.get("details") or body.get("error") or f"HTTP {response.status_code}"


class InMemoryScoreStore(ScoreStore):
    """
    Keeps scores in process memory. Used for offline play and in tests.
    """

    def __init__(self, entries: Optional[List[LeaderboardEntry]] = None):
        self.entries: List[LeaderboardEntry] = list(entries or [])
        self._lock = threading.Lock()

    def save_score(self, name: str, score: int) -> None:
        name, score = validate_submission(name, score)
        with self._lock:
            self.entries.append(
                LeaderboardEntry(name=name, score=score, timestamp=datetime.now(timezone.utc))
            )

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
        with self._lock:
            return rank_entries(self.entries, limit)
