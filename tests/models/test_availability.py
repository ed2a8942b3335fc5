"""Unit tests for slot and day availability."""

from datetime import date, datetime

import pytest

from models.availability import (
    DayStatus,
    check_slot_selection,
    classify_day,
    day_slots,
    is_day_past,
    is_day_today,
    is_slot_disabled,
)
from models.exceptions import (
    PastSlotSelectionError,
    SlotOverlapError,
    SlotUnavailableError,
)
from tests.fixtures.core.events import NOW, at


@pytest.fixture
def events(standard_store):
    return standard_store.list()


class TestIsSlotDisabled:
    def test_past_slot_disabled(self, events):
        assert is_slot_disabled(at(8, 30), events, NOW) is True

    def test_free_future_slot_enabled(self, events):
        assert is_slot_disabled(at(14), events, NOW) is False

    def test_slot_inside_event_disabled(self, events):
        assert is_slot_disabled(at(11, 30), events, NOW) is True

    def test_probe_reaches_into_next_event(self, events):
        """The 30-minute probe from 10:45 overlaps the review at 11:00."""
        assert is_slot_disabled(at(10, 45), events, NOW) is True

    def test_slot_right_after_event_enabled(self, events):
        assert is_slot_disabled(at(10, 30), events, NOW) is False

    def test_slot_at_now_enabled(self):
        assert is_slot_disabled(NOW, [], NOW) is False


class TestClassifyDay:
    def test_past_today_future(self):
        today = NOW.date()

        assert classify_day(date(2025, 5, 20), today) is DayStatus.PAST
        assert classify_day(date(2025, 5, 21), today) is DayStatus.TODAY
        assert classify_day(date(2025, 5, 22), today) is DayStatus.FUTURE

    def test_time_of_day_ignored(self):
        assert classify_day(datetime(2025, 5, 21, 23, 59), NOW) is DayStatus.TODAY
        assert classify_day(datetime(2025, 5, 20, 23, 59), NOW) is DayStatus.PAST

    def test_helpers(self):
        assert is_day_past(date(2025, 5, 20), NOW) is True
        assert is_day_past(date(2025, 5, 21), NOW) is False
        assert is_day_today(date(2025, 5, 21), NOW) is True


class TestCheckSlotSelection:
    def test_free_selection_passes(self, events):
        check_slot_selection(at(14), at(15), events, NOW)

    def test_past_selection(self, events):
        with pytest.raises(PastSlotSelectionError) as exc_info:
            check_slot_selection(at(8), at(8, 30), events, NOW)

        assert exc_info.value.message == "You cannot book a meeting in the past."

    def test_booked_selection(self, events):
        with pytest.raises(SlotOverlapError) as exc_info:
            check_slot_selection(at(11, 30), at(12), events, NOW)

        assert exc_info.value.message == (
            "This time slot is already booked. Please select a different time."
        )

    def test_uses_selection_end_not_probe(self, events):
        """A 15-minute selection at 10:45 ends exactly when the review starts."""
        check_slot_selection(at(10, 45), at(11), events, NOW)

    def test_errors_share_base(self, events):
        with pytest.raises(SlotUnavailableError):
            check_slot_selection(at(8), at(8, 30), events, NOW)


class TestDaySlots:
    def test_half_hour_grid(self, events):
        slots = day_slots(date(2025, 5, 21), events, NOW)

        assert len(slots) == 48
        assert slots[0].start == datetime(2025, 5, 21, 0, 0)
        assert slots[-1].start == datetime(2025, 5, 21, 23, 30)

    def test_disabled_flags(self, events):
        slots = {slot.start: slot.disabled for slot in day_slots(date(2025, 5, 21), events, NOW)}

        assert slots[at(8, 30)] is True  # past
        assert slots[at(9)] is False
        assert slots[at(10)] is True  # standup
        assert slots[at(10, 30)] is False
        assert slots[at(11, 30)] is True  # review
        assert slots[at(13)] is True  # lunch until 13:15
        assert slots[at(13, 30)] is False

    def test_custom_step(self):
        assert len(day_slots(date(2025, 5, 22), [], NOW, slot_minutes=15)) == 96

    @pytest.mark.parametrize("minutes", [0, -30, 7])
    def test_bad_step(self, minutes):
        with pytest.raises(ValueError, match="evenly divide"):
            day_slots(date(2025, 5, 22), [], NOW, slot_minutes=minutes)
