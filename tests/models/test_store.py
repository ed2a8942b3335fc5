"""Unit tests for EventStore.

The store assigns ids as max+1, keeps events free of overlaps at its own
boundary, and hands out sorted snapshots that callers cannot use to mutate it.
"""

import pytest
from pydantic import ValidationError

from models.exceptions import EventNotFoundError, EventOverlapError
from models.store import EventStore
from tests.fixtures.core.events import at, create_event_draft
from tests.fixtures.core.sessions import create_event_store


class TestAdd:
    """Test committing new events."""

    def test_first_id_is_one(self, empty_store, event_draft):
        event = empty_store.add(event_draft)

        assert event.event_id == 1
        assert empty_store.event_count == 1

    def test_ids_are_max_plus_one(self, standard_store):
        event = standard_store.add(create_event_draft(start=at(14), end=at(15)))

        assert event.event_id == 5

    def test_ids_not_reused_below_max(self, standard_store):
        standard_store.remove(2)

        event = standard_store.add(create_event_draft(start=at(14), end=at(15)))

        assert event.event_id == 5

    def test_id_reused_after_removing_max(self, standard_store):
        standard_store.remove(4)

        event = standard_store.add(create_event_draft(start=at(14), end=at(15)))

        assert event.event_id == 4

    def test_draft_event_id_ignored(self, empty_store):
        draft = create_event_draft(event_id=42)

        event = empty_store.add(draft)

        assert event.event_id == 1

    def test_overlap_rejected(self, standard_store):
        with pytest.raises(EventOverlapError) as exc_info:
            standard_store.add(create_event_draft(start=at(10, 15), end=at(10, 45)))

        assert exc_info.value.conflicting_id == 1
        assert standard_store.event_count == 4

    def test_touching_allowed(self, standard_store):
        event = standard_store.add(create_event_draft(start=at(10, 30), end=at(11)))

        assert event.event_id == 5

    def test_invalid_range_rejected(self, empty_store):
        with pytest.raises(ValidationError):
            empty_store.add(create_event_draft(start=at(11), end=at(10)))

        assert empty_store.event_count == 0

    def test_tracks_modifications(self, empty_store, event_draft):
        empty_store.add(event_draft)

        assert empty_store.update_count == 1
        assert empty_store.last_updated is not None


class TestUpdate:
    """Test replacing fields of stored events."""

    def test_update_title(self, standard_store):
        updated = standard_store.update(1, {"title": "Daily standup"})

        assert updated.title == "Daily standup"
        assert updated.start == at(10)
        assert standard_store.get(1).title == "Daily standup"

    def test_update_keeps_position_and_id(self, standard_store):
        standard_store.update(2, {"start": at(14), "end": at(15)})

        assert standard_store.events[1].event_id == 2

    def test_update_missing_raises(self, standard_store):
        with pytest.raises(EventNotFoundError) as exc_info:
            standard_store.update(99, {"title": "Ghost"})

        assert exc_info.value.event_id == 99

    def test_unknown_field_raises(self, standard_store):
        with pytest.raises(ValueError, match="event_id"):
            standard_store.update(1, {"event_id": 9})

    def test_overlap_with_other_rejected(self, standard_store):
        with pytest.raises(EventOverlapError) as exc_info:
            standard_store.update(1, {"end": at(11, 30)})

        assert exc_info.value.event_id == 1
        assert exc_info.value.conflicting_id == 2
        assert standard_store.get(1).end == at(10, 30)

    def test_own_times_ignored(self, standard_store):
        updated = standard_store.update(2, {"start": at(11, 15), "end": at(12)})

        assert updated.start == at(11, 15)


class TestRemoveAndClear:
    """Test removal."""

    def test_remove(self, standard_store):
        standard_store.remove(3)

        assert standard_store.get(3) is None
        assert standard_store.event_count == 3

    def test_remove_missing_is_noop(self, standard_store):
        count = standard_store.update_count

        standard_store.remove(99)

        assert standard_store.event_count == 4
        assert standard_store.update_count == count

    def test_clear(self, standard_store):
        standard_store.clear()

        assert standard_store.event_count == 0
        assert standard_store.update_count == 0
        assert standard_store.last_updated is None


class TestList:
    """Test snapshots."""

    def test_sorted_by_start(self, standard_store):
        titles = [event.title for event in standard_store.list()]

        assert titles == ["Yesterday sync", "Standup", "Design review", "Lunch"]

    def test_snapshot_is_a_copy(self, standard_store):
        snapshot = standard_store.list()
        snapshot.clear()

        assert standard_store.event_count == 4

    def test_listed_events_are_read_only(self, standard_store):
        event = standard_store.list()[0]

        with pytest.raises(ValidationError):
            event.title = "Hijacked"

        assert standard_store.get(event.event_id).title == "Yesterday sync"


class TestQuery:
    """Test filtered listing."""

    def test_range_filter(self, standard_store):
        result = standard_store.query(start=at(10, 30), end=at(12, 30))

        assert [e.event_id for e in result["events"]] == [2]

    def test_search_is_case_insensitive_over_description(self, standard_store):
        result = standard_store.query(search="ROADMAP")

        assert [e.title for e in result["events"]] == ["Design review"]

    def test_pagination(self, standard_store):
        result = standard_store.query(limit=2, offset=1)

        assert result["count"] == 2
        assert result["total_count"] == 4
        assert [e.title for e in result["events"]] == ["Standup", "Design review"]


class TestValidateState:
    """Test consistency checks."""

    def test_standard_store_is_consistent(self, standard_store):
        assert standard_store.validate_state() == []

    def test_detects_duplicates_and_overlaps(self, calendar_event):
        store = EventStore(events=[calendar_event, calendar_event])

        errors = store.validate_state()

        assert any("Duplicate event id 1" in e for e in errors)
        assert any("overlap" in e for e in errors)

    def test_snapshot(self):
        store = create_event_store([create_event_draft(title="Solo", start=at(10), end=at(11))])

        snapshot = store.get_snapshot()

        assert snapshot["event_count"] == 1
        assert snapshot["events"][0]["start"] == "2025-05-21T10:00:00"
