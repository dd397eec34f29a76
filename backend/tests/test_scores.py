"""
Tests for score submission validation and leaderboard ordering.
"""

import sys
import os
from datetime import datetime

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import InvalidInput  # noqa: E402
from domain.scores import (  # noqa: E402
    LeaderboardEntry,
    entry_from_row,
    parse_timestamp,
    rank_entries,
    validate_submission,
)


class TestValidateSubmission:
    """Tests for validate_submission()."""

    def test_boundaries_accepted(self):
        assert validate_submission("Al", 1000) == ("Al", 1000)
        assert validate_submission("A" * 20, 0) == ("A" * 20, 0)

    def test_whole_float_score_accepted(self):
        """JSON clients may send 5.0 for 5."""
        name, score = validate_submission("Al", 5.0)
        assert score == 5
        assert type(score) is int

    @pytest.mark.parametrize("score", [1000.5, 1001.0, float("nan"), float("inf")])
    def test_bad_float_scores_rejected(self, score):
        with pytest.raises(InvalidInput):
            validate_submission("Al", score)

    def test_name_is_trimmed(self):
        assert validate_submission("  Al  ", 5) == ("Al", 5)

    @pytest.mark.parametrize("name,score", [
        ("A", 10),
        ("A" * 21, 10),
        ("Al", 1001),
        ("Al", -1),
        ("", 10),
        ("   ", 10),
        (None, 10),
        ("Al", None),
        ("Al", "10"),
        ("Al", 10.5),
        ("Al", True),
    ])
    def test_invalid_rejected(self, name, score):
        with pytest.raises(InvalidInput):
            validate_submission(name, score)


class TestRankEntries:
    """Tests for leaderboard ordering."""

    def test_orders_by_score_descending(self):
        entries = [
            LeaderboardEntry("a", 50),
            LeaderboardEntry("b", 200),
            LeaderboardEntry("c", 75),
        ]
        assert [e.score for e in rank_entries(entries)] == [200, 75, 50]

    def test_keeps_top_ten(self):
        entries = [LeaderboardEntry(f"p{i}", i) for i in range(15)]
        ranked = rank_entries(entries)
        assert len(ranked) == 10
        assert ranked[0].score == 14
        assert ranked[-1].score == 5

    def test_ties_keep_older_entry_first(self):
        entries = [
            LeaderboardEntry("late", 10, datetime(2024, 1, 2)),
            LeaderboardEntry("early", 10, datetime(2024, 1, 1)),
        ]
        assert [e.name for e in rank_entries(entries)] == ["early", "late"]

    def test_custom_limit(self):
        entries = [LeaderboardEntry("a", 1), LeaderboardEntry("b", 2)]
        assert [e.name for e in rank_entries(entries, limit=1)] == ["b"]


class TestEntryConversion:
    """Tests for row <-> entry conversion."""

    def test_entry_from_row_with_iso_timestamp(self):
        entry = entry_from_row({
            "player_name": "Al",
            "score": 42,
            "created_at": "2024-05-01T12:30:00Z",
        })
        assert entry.name == "Al"
        assert entry.score == 42
        assert entry.timestamp.year == 2024

    def test_entry_from_row_with_datetime(self):
        ts = datetime(2024, 5, 1, 12, 30)
        entry = entry_from_row({"player_name": "Al", "score": 42, "created_at": ts})
        assert entry.timestamp == ts

    def test_to_dict(self):
        entry = LeaderboardEntry("Al", 42, datetime(2024, 5, 1, 12, 30))
        assert entry.to_dict() == {
            "player_name": "Al",
            "score": 42,
            "created_at": "2024-05-01T12:30:00",
        }

    def test_parse_timestamp_garbage(self):
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None
