"""
Tests for running session commands against persistent storage.
"""

import pytest

from contraction_clock.analysis.rules import FOUR_ONE_ONE
from contraction_clock.database.repository import SessionRepository
from contraction_clock.service import ClockService

MINUTE = 60_000


@pytest.fixture
def service(initialized_db, fake_clock):
    return ClockService(SessionRepository(), clock=fake_clock)


def record(service, clock, duration_ms, rest_ms=0):
    """Time one contraction of ``duration_ms`` then wait ``rest_ms``."""
    service.begin()
    clock.advance(duration_ms)
    event = service.end()
    clock.advance(rest_ms)
    return event


class TestSessionCommands:
    def test_begin_persists_in_progress(self, service, fake_clock):
        started = fake_clock.now
        service.begin()

        tracker = service.load()
        assert tracker.is_active
        assert tracker.in_progress.started_at == started

    def test_end_records_across_instances(self, initialized_db, fake_clock):
        ClockService(SessionRepository(), clock=fake_clock).begin()
        fake_clock.advance(65_000)

        event = ClockService(SessionRepository(), clock=fake_clock).end()

        assert event.duration == 65_000
        events = SessionRepository().load_events()
        assert events == [event]

    def test_short_contraction_not_persisted(self, service, fake_clock):
        service.begin()
        fake_clock.advance(999)

        assert service.end() is None
        assert service.load().events == ()
        assert not service.load().is_active

    def test_toggle(self, service, fake_clock):
        service.toggle()
        fake_clock.advance(MINUTE)
        event = service.toggle()

        assert event.duration == MINUTE

    def test_intensity_persists(self, service, fake_clock):
        service.set_intensity(9)
        event = record(service, fake_clock, MINUTE)

        assert service.load().intensity == 9
        assert event.intensity == pytest.approx(0.9)

    def test_invalid_intensity(self, service):
        with pytest.raises(ValueError):
            service.set_intensity(0)

    def test_clear(self, service, fake_clock):
        service.set_intensity(7)
        record(service, fake_clock, MINUTE, rest_ms=MINUTE)
        service.begin()

        service.clear()

        tracker = service.load()
        assert tracker.events == ()
        assert not tracker.is_active
        assert tracker.intensity == 7

    def test_default_intensity_for_new_session(self, initialized_db, fake_clock):
        service = ClockService(SessionRepository(), clock=fake_clock, default_intensity=2)

        assert service.load().intensity == 2


class TestFrames:
    def test_frame_at_current_time(self, service, fake_clock):
        for _ in range(13):
            record(service, fake_clock, MINUTE, rest_ms=4 * MINUTE)

        frame = service.frame()

        assert frame.now == fake_clock.now
        assert frame.stats.count == 13
        assert frame.streak.threshold_met

    def test_frame_does_not_write(self, service, fake_clock):
        service.begin()
        fake_clock.advance(10_000)

        frame = service.frame()

        assert frame.active_duration_ms == 10_000
        assert service.load().events == ()

    def test_rule_selection(self, initialized_db, fake_clock):
        service = ClockService(SessionRepository(), clock=fake_clock, rule_name="411")

        assert service.rule is FOUR_ONE_ONE
        assert service.load().evaluator.config is FOUR_ONE_ONE

    def test_unknown_rule(self, initialized_db):
        with pytest.raises(ValueError, match="Unknown rule"):
            ClockService(SessionRepository(), rule_name="nope")
