"""Unit tests for CalendarClock and to_local_naive."""

from datetime import datetime, timedelta, timezone

import pytest

from models.clock import CalendarClock, to_local_naive
from tests.fixtures.core.events import NOW


class TestToLocalNaive:
    """Test timezone normalization."""

    def test_naive_value_unchanged(self):
        assert to_local_naive(NOW) == NOW

    def test_aware_value_converted_to_local(self):
        aware = datetime(2025, 5, 21, 9, 0, tzinfo=timezone.utc)

        result = to_local_naive(aware)

        assert result.tzinfo is None
        assert result == aware.astimezone().replace(tzinfo=None)


class TestCalendarClock:
    """Test pinned and live clock behavior."""

    def test_live_clock_follows_system_time(self):
        clock = CalendarClock()

        before = datetime.now()
        reading = clock.now()
        after = datetime.now()

        assert clock.is_fixed is False
        assert before <= reading <= after

    def test_pinned_clock(self, fixed_clock):
        assert fixed_clock.is_fixed is True
        assert fixed_clock.now() == NOW
        assert fixed_clock.now() == NOW

    def test_today_is_midnight(self, fixed_clock):
        assert fixed_clock.today() == datetime(2025, 5, 21)

    def test_pinned_aware_time_is_normalized(self):
        aware = datetime(2025, 5, 21, 9, 0, tzinfo=timezone.utc)

        clock = CalendarClock(fixed_time=aware)

        assert clock.fixed_time.tzinfo is None

    def test_set_time_allows_backwards(self, fixed_clock):
        earlier = NOW - timedelta(days=2)

        fixed_clock.set_time(earlier)

        assert fixed_clock.now() == earlier

    def test_advance(self, fixed_clock):
        fixed_clock.advance(timedelta(minutes=90))

        assert fixed_clock.now() == NOW + timedelta(minutes=90)

    def test_advance_negative_raises(self, fixed_clock):
        with pytest.raises(ValueError, match="backwards"):
            fixed_clock.advance(timedelta(seconds=-1))

    def test_advance_live_clock_raises(self):
        with pytest.raises(ValueError, match="pin a time"):
            CalendarClock().advance(timedelta(minutes=1))

    def test_release(self, fixed_clock):
        fixed_clock.release()

        assert fixed_clock.is_fixed is False

    def test_to_dict(self, fixed_clock):
        assert fixed_clock.to_dict() == {
            "current_time": "2025-05-21T09:00:00",
            "is_fixed": True,
        }
