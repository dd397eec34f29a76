import argparse
import logging
import os
import random
import uuid
from collections import deque
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Deque, Dict, List, Optional, Union

from dotenv import load_dotenv

from domain.events import KeyPress, Restart, Tick
from domain.game_state import GameConfig, GameState, new_game_state
from domain.transitions import restart, step
from players import Player, RandomPlayer
from services.input_router import InputRouter
from services.score_client import InMemoryScoreStore, ScoreApiClient, ScoreStore
from services.score_reporter import ReportResult, ScoreReporter
from services.tick_scheduler import TickScheduler

load_dotenv()

logger = logging.getLogger(__name__)

Event = Union[Tick, KeyPress, Restart]
Renderer = Callable[[GameState], None]


class SnakeGame:
    """
    One play session.

    Manages:
      - Config and random source
      - The current GameState (replaced, never edited, on every event)
      - A FIFO queue of key and restart events
      - The tick scheduler
      - Score reporting on the game-over edge
      - Render observers
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        player_name: Optional[str] = None,
        reporter: Optional[ScoreReporter] = None,
        rng: Optional[random.Random] = None,
        executor: Optional[Executor] = None,
    ):
        self.config = config or GameConfig()
        self.player_name = player_name
        self.reporter = reporter
        self.rng = rng or random.Random()
        self.executor = executor

        self.router = InputRouter()
        self.scheduler = TickScheduler()
        self.events: Deque[Event] = deque()
        self.renderers: List[Renderer] = []

        self.state = new_game_state(self.config, self.rng)
        self.game_id = str(uuid.uuid4())
        self.games_played = 1

        self.report_results: Dict[str, ReportResult] = {}
        self.pending_reports: Dict[str, Future] = {}

        logger.info(f"Game {self.game_id} started on a {self.config.grid_size}x{self.config.grid_size} board")

    # -------------------------------------------------------------------------
    # Host-facing API
    # -------------------------------------------------------------------------

    def add_renderer(self, renderer: Renderer) -> None:
        """Register a callback that receives the state after every clock() call."""
        self.renderers.append(renderer)

    def press_key(self, key: str) -> None:
        self.events.append(KeyPress(key))

    def request_restart(self) -> None:
        self.events.append(Restart())

    def clock(self, now_ms: float) -> GameState:
        """
        Handle one clock callback from the host:
          1) Apply queued key/restart events in arrival order
          2) Commit a tick if the scheduler says one is due
          3) Hand the resulting snapshot to the renderers
        """
        if not self.scheduler.attached:
            return self.state

        self._drain_events()
        if self.scheduler.poll(now_ms, self.state):
            self._apply(Tick())

        for renderer in self.renderers:
            renderer(self.state)
        return self.state

    def tick(self) -> GameState:
        """Apply queued events and then one tick, ignoring wall-clock pacing."""
        if not self.scheduler.attached:
            return self.state

        self._drain_events()
        self._apply(Tick())
        return self.state

    def stop(self) -> None:
        """Detach from the clock and wait for outstanding score reports."""
        self.scheduler.stop()
        self.events.clear()
        if self.executor is not None:
            self.executor.shutdown(wait=True)

    # -------------------------------------------------------------------------
    # Event handling
    # -------------------------------------------------------------------------

    def _drain_events(self) -> None:
        while self.events:
            self._apply(self.events.popleft())

    def _apply(self, event: Event) -> None:
        """The only place self.state is written."""
        previous = self.state

        if isinstance(event, Tick):
            self.state = step(previous, self.config, self.rng)
        elif isinstance(event, KeyPress):
            self.state = self.router.route(previous, event.key)
        elif isinstance(event, Restart):
            self.state = restart(previous, self.config, self.rng)
            self.game_id = str(uuid.uuid4())
            self.games_played += 1
            self.scheduler.reset()
            logger.info(f"Game {self.game_id} started (restart, high score {self.state.high_score})")
            return
        else:
            raise TypeError(f"Unknown event: {event!r}")

        if self.state.is_game_over and not previous.is_game_over:
            self._on_game_over()

    def _on_game_over(self) -> None:
        logger.info(
            f"Game {self.game_id} over: score {self.state.score}, "
            f"length {len(self.state.snake)}, high score {self.state.high_score}"
        )
        if self.reporter is None:
            return
        if not self.player_name:
            logger.warning(f"No player name set; score for game {self.game_id} not reported")
            return

        game_id, score = self.game_id, self.state.score
        if self.executor is None:
            self.report_results[game_id] = self.reporter.report(game_id, self.player_name, score)
        else:
            try:
                future = self.executor.submit(self.reporter.report, game_id, self.player_name, score)
            except RuntimeError as e:
                # Executor already shut down
                logger.warning(f"Reporting game {game_id} inline: {e}")
                self.report_results[game_id] = self.reporter.report(game_id, self.player_name, score)
                return
            self.pending_reports[game_id] = future
            future.add_done_callback(lambda f, gid=game_id: self._collect_report(gid, f))

    def _collect_report(self, game_id: str, future: Future) -> None:
        self.pending_reports.pop(game_id, None)
        try:
            self.report_results[game_id] = future.result()
        except Exception as e:  # noqa: BLE001 - the game keeps running
            logger.error(f"Score report for game {game_id} crashed: {e}")
            self.report_results[game_id] = ReportResult(game_id=game_id, saved=False, error=str(e))

    def last_report(self) -> Optional[ReportResult]:
        """Report result of the current game, if it has finished and been reported."""
        return self.report_results.get(self.game_id)


# -------------------------------
# Headless Runner
# -------------------------------

def run_autopilot(game: SnakeGame, player: Player, max_ticks: int = 10_000) -> GameState:
    """
    Let an automated player drive the game until it ends or max_ticks pass.

    Ticks are applied back to back, without waiting for the clock.
    """
    for _ in range(max_ticks):
        if game.state.is_game_over:
            break
        key = player.get_key(game.state, game.config.grid_size)
        if key is not None:
            game.press_key(key)
        game.tick()
    return game.state


def build_score_store(offline: bool, api_url: Optional[str]) -> ScoreStore:
    if offline:
        return InMemoryScoreStore()
    return ScoreApiClient(base_url=api_url)


def print_leaderboard(entries) -> None:
    print("\nLeaderboard:")
    if not entries:
        print("  (no scores yet)")
    for rank, entry in enumerate(entries, start=1):
        print(f"  {rank:2d}. {entry.name:<20} {entry.score:>5}")


# -------------------------------
# Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(description="Play Snake and submit your score to the leaderboard.")
    parser.add_argument("--name", type=str, required=True,
                        help="Player name for the leaderboard (2-20 characters)")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let the random safe player drive and print the result")
    parser.add_argument("--offline", action="store_true",
                        help="Keep scores in memory instead of calling the score API")
    parser.add_argument("--api-url", type=str, default=None,
                        help="Score API base URL (default: SCORE_API_URL or http://localhost:5000)")
    parser.add_argument("--grid-size", type=int, default=GameConfig.grid_size,
                        help="Width and height of the board")
    parser.add_argument("--initial-length", type=int, default=GameConfig.initial_snake_length,
                        help="Starting length of the snake")
    parser.add_argument("--speed", type=float, default=GameConfig.initial_speed,
                        help="Starting speed in ticks per second")
    parser.add_argument("--speed-increment", type=float, default=GameConfig.speed_increment,
                        help="Speed added for every piece of food eaten")
    parser.add_argument("--max-ticks", type=int, default=10_000,
                        help="Autopilot only: stop after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible games")

    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = GameConfig(
        grid_size=args.grid_size,
        initial_snake_length=args.initial_length,
        initial_speed=args.speed,
        speed_increment=args.speed_increment,
    )
    reporter = ScoreReporter(build_score_store(args.offline, args.api_url))
    rng = random.Random(args.seed)

    if args.autopilot:
        game = SnakeGame(config=config, player_name=args.name, reporter=reporter, rng=rng)
        final_state = run_autopilot(game, RandomPlayer(rng=random.Random(args.seed)), args.max_ticks)
        print("\n" + final_state.print_board(config.grid_size) + "\n")
        print(f"Final score: {final_state.score} (length {len(final_state.snake)})")
        result = game.last_report()
        if result is not None and not result.saved:
            print(f"Score not saved: {result.error}")
        print_leaderboard(result.leaderboard if result and result.saved else reporter.leaderboard)
        return

    from cli.play import run_terminal

    game = SnakeGame(
        config=config,
        player_name=args.name,
        reporter=reporter,
        rng=rng,
        executor=ThreadPoolExecutor(max_workers=1),
    )
    reporter.refresh_leaderboard()
    run_terminal(game)


if __name__ == "__main__":
    main()
