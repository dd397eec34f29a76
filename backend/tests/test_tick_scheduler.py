"""
Tests for the tick scheduler.
"""

import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RIGHT  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402


def make_state(speed=5.0, is_paused=False, is_game_over=False):
    return GameState(
        snake=((5, 5), (4, 5), (3, 5)),
        food=(0, 0),
        direction=RIGHT,
        score=0,
        high_score=0,
        is_game_over=is_game_over,
        is_paused=is_paused,
        speed=speed,
    )


class TestTickScheduler:
    """Tests for TickScheduler.poll()."""

    def test_first_poll_only_sets_baseline(self):
        scheduler = TickScheduler()
        assert scheduler.poll(10_000, make_state()) is False
        assert scheduler.last_tick_ms == 10_000

    def test_tick_after_interval(self):
        """At speed 5 a tick is due every 200ms."""
        scheduler = TickScheduler()
        state = make_state(speed=5.0)
        scheduler.poll(0, state)

        assert scheduler.poll(100, state) is False
        assert scheduler.poll(199, state) is False
        assert scheduler.poll(200, state) is True
        assert scheduler.last_tick_ms == 200
        assert scheduler.ticks == 1

    def test_one_tick_per_interval_regardless_of_poll_rate(self):
        scheduler = TickScheduler()
        state = make_state(speed=10.0)
        scheduler.poll(0, state)

        ticks = sum(scheduler.poll(ms, state) for ms in range(1, 1001))
        assert ticks == 10

    def test_late_poll_commits_only_one_tick(self):
        scheduler = TickScheduler()
        state = make_state(speed=5.0)
        scheduler.poll(0, state)
        assert scheduler.poll(5000, state) is True
        assert scheduler.poll(5001, state) is False

    def test_faster_speed_shortens_interval(self):
        scheduler = TickScheduler()
        scheduler.poll(0, make_state(speed=5.0))
        assert scheduler.poll(150, make_state(speed=5.0)) is False
        assert scheduler.poll(150, make_state(speed=10.0)) is True

    def test_no_tick_while_paused_and_no_burst_on_resume(self):
        scheduler = TickScheduler()
        scheduler.poll(0, make_state())

        for ms in range(100, 5000, 100):
            assert scheduler.poll(ms, make_state(is_paused=True)) is False

        # Resuming waits a full interval from the last paused poll
        assert scheduler.poll(5000, make_state()) is False
        assert scheduler.poll(5099, make_state()) is False
        assert scheduler.poll(5100, make_state()) is True

    def test_no_tick_when_game_over(self):
        scheduler = TickScheduler()
        scheduler.poll(0, make_state())
        assert scheduler.poll(10_000, make_state(is_game_over=True)) is False

    def test_stop_detaches(self):
        scheduler = TickScheduler()
        scheduler.poll(0, make_state())
        scheduler.stop()
        assert scheduler.attached is False
        assert scheduler.poll(10_000, make_state()) is False

    def test_reset_starts_new_baseline(self):
        scheduler = TickScheduler()
        scheduler.poll(0, make_state())
        scheduler.poll(200, make_state())
        scheduler.reset()
        assert scheduler.ticks == 0
        assert scheduler.poll(10_000, make_state()) is False
        assert scheduler.poll(10_200, make_state()) is True

    def test_clock_going_backwards_resets_baseline(self):
        scheduler = TickScheduler()
        scheduler.poll(1000, make_state())
        assert scheduler.poll(500, make_state()) is False
        assert scheduler.last_tick_ms == 500
