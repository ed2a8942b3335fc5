"""Unit tests for EventDraft and CalendarEvent."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from models.event import CalendarEvent, EventDraft
from tests.fixtures.core.events import at, create_calendar_event


class TestEventDraft:
    """Test the uncommitted candidate model."""

    def test_defaults(self):
        draft = EventDraft(start=at(10), end=at(10, 30))

        assert draft.event_id is None
        assert draft.title == ""
        assert draft.description == ""

    def test_accepts_inverted_range(self):
        """Range checks belong to validation, not to the draft."""
        draft = EventDraft(title="Backwards", start=at(11), end=at(10))

        assert draft.end < draft.start

    def test_none_description_becomes_empty(self):
        draft = EventDraft(start=at(10), end=at(11), description=None)

        assert draft.description == ""

    def test_aware_times_normalized(self):
        draft = EventDraft(
            start=datetime(2025, 5, 21, 10, 0, tzinfo=timezone.utc),
            end=datetime(2025, 5, 21, 11, 0, tzinfo=timezone.utc),
        )

        assert draft.start.tzinfo is None
        assert draft.end.tzinfo is None

    def test_from_event_copies_fields(self, calendar_event):
        draft = EventDraft.from_event(calendar_event)

        assert draft.event_id == calendar_event.event_id
        assert draft.title == calendar_event.title
        assert draft.start == calendar_event.start
        assert draft.end == calendar_event.end

    def test_serializes_times_as_iso(self):
        draft = EventDraft(title="x", start=at(10), end=at(10, 30))

        data = draft.model_dump(mode="json")

        assert data["start"] == "2025-05-21T10:00:00"
        assert data["end"] == "2025-05-21T10:30:00"


class TestCalendarEvent:
    """Test the committed event model."""

    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError, match="end time must be after start"):
            CalendarEvent(event_id=1, title="x", start=at(11), end=at(10))

    def test_zero_length_rejected(self):
        with pytest.raises(ValidationError):
            CalendarEvent(event_id=1, title="x", start=at(10), end=at(10))

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            CalendarEvent(event_id=0, title="x", start=at(10), end=at(11))

    def test_duration_minutes(self):
        event = create_calendar_event(start=at(12, 30), end=at(13, 15))

        assert event.duration_minutes() == 45

    def test_get_summary(self):
        event = create_calendar_event(event_id=7, title="Lunch", start=at(12, 30), end=at(13, 15))

        assert event.get_summary() == "#7 [2025-05-21 12:30 - 13:15] Lunch"
