"""
Reports the final score of each finished game to a score store.

The reporter never raises into the game loop: invalid submissions are
rejected locally, transient store failures are retried a bounded number of
times with a fixed delay, and whatever happened is returned as a
ReportResult and logged.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from domain.constants import MAX_RETRIES, RETRY_DELAY_SECONDS
from domain.errors import InvalidInput, PersistenceUnavailable
from domain.scores import LeaderboardEntry, validate_submission
from .retry import call_with_retries
from .score_client import ScoreStore

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    """
    Outcome of one score report.

    Attributes:
        game_id: game the score belongs to
        saved: True if the store accepted the score
        attempts: number of save attempts made (0 if rejected locally or skipped)
        error: message for the player when the score was not saved
        leaderboard: refreshed leaderboard after a successful save
    """

    game_id: str
    saved: bool
    attempts: int = 0
    error: Optional[str] = None
    leaderboard: List[LeaderboardEntry] = field(default_factory=list)


class ScoreReporter:
    """
    Sends (name, score) to the store once per game id.
    """

    def __init__(
        self,
        store: ScoreStore,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.store = store
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.sleep = sleep
        self.leaderboard: List[LeaderboardEntry] = []
        self._reported: Set[str] = set()
        self._lock = threading.Lock()

    def report(self, game_id: str, name: str, score: int) -> ReportResult:
        """
        Save the final score of game_id and refresh the leaderboard.

        A game id that was already reported is skipped, so the store sees at
        most one submission per game.
        """
        with self._lock:
            if game_id in self._reported:
                logger.warning(f"Score for game {game_id} already reported; skipping")
                return ReportResult(game_id=game_id, saved=False, error="Score already reported")
            self._reported.add(game_id)

        try:
            name, score = validate_submission(name, score)
        except InvalidInput as e:
            logger.warning(f"Not submitting score for game {game_id}: {e}")
            return ReportResult(game_id=game_id, saved=False, error=str(e))

        attempts = 0

        def attempt_save():
            nonlocal attempts
            attempts += 1
            self.store.save_score(name, score)

        try:
            call_with_retries(
                attempt_save,
                retry_on=(PersistenceUnavailable,),
                max_retries=self.max_retries,
                delay=self.retry_delay,
                sleep=self.sleep,
                description=f"Saving score for game {game_id}",
            )
        except (PersistenceUnavailable, InvalidInput) as e:
            logger.error(f"Failed to save score {score} for {name} (game {game_id}): {e}")
            return ReportResult(
                game_id=game_id,
                saved=False,
                attempts=attempts,
                error=f"Failed to save score: {e}",
            )

        logger.info(f"Saved score {score} for {name} (game {game_id}) after {attempts} attempt(s)")
        return ReportResult(
            game_id=game_id,
            saved=True,
            attempts=attempts,
            leaderboard=self.refresh_leaderboard(),
        )

    def refresh_leaderboard(self) -> List[LeaderboardEntry]:
        """Fetch the leaderboard; on failure keep and return the last known one."""
        try:
            self.leaderboard = self.store.get_leaderboard()
        except PersistenceUnavailable as e:
            logger.warning(f"Could not refresh leaderboard: {e}")
        return self.leaderboard
