"""
Tests for session statistics and the contraction log.
"""

import pytest

from contraction_clock.analysis.stats import build_log, calculate_session_stats
from tests.helpers.synthetic_events import BASE_TIME_MS, make_event, make_series


class TestSessionStats:
    def test_empty(self):
        stats = calculate_session_stats([])

        assert stats.count == 0
        assert stats.avg_duration_ms is None
        assert stats.last_interval_ms is None
        assert stats.last_duration_ms is None

    def test_single_event(self):
        stats = calculate_session_stats([make_event(BASE_TIME_MS, 45_000)])

        assert stats.count == 1
        assert stats.avg_duration_ms == 45_000
        assert stats.last_interval_ms is None
        assert stats.last_duration_ms == 45_000

    def test_multiple_events(self):
        events = make_series([(0, 40_000), (420_000, 60_000), (660_000, 80_000)])

        stats = calculate_session_stats(events)

        assert stats.count == 3
        assert stats.avg_duration_ms == pytest.approx(60_000)
        assert stats.last_interval_ms == 240_000
        assert stats.last_duration_ms == 80_000


class TestBuildLog:
    def test_empty(self):
        assert build_log([]) == []

    def test_newest_first(self):
        events = make_series([(0, 40_000), (420_000, 60_000), (660_000, 80_000)])

        rows = build_log(events)

        assert [row.number for row in rows] == [3, 2, 1]
        assert [row.frequency_ms for row in rows] == [240_000, 420_000, None]
        assert [row.duration_ms for row in rows] == [80_000, 60_000, 40_000]
        assert [row.is_latest for row in rows] == [True, False, False]

    def test_intensity_level(self):
        rows = build_log([make_event(BASE_TIME_MS, 60_000, intensity=0.7)])

        assert rows[0].intensity_level == 7
        assert rows[0].start == BASE_TIME_MS
