"""In-memory event store."""

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from models.event import CalendarEvent, EventDraft
from models.exceptions import EventNotFoundError, EventOverlapError
from models.interval import overlaps

logger = logging.getLogger(__name__)

# Fields of an event that update() may change.
EDITABLE_FIELDS = ("title", "description", "start", "end")


class EventStore(BaseModel):
    """Canonical collection of committed events for one session.

    The store is the single source of truth for events. It assigns ids
    (max existing id + 1, never reused while higher ids exist) and refuses any
    mutation that would make two events overlap.

    Only the edit workflow's confirm step writes to the store; everything else
    reads snapshots from list().

    Args:
        events: Committed events in insertion order.
        last_updated: Local time of the last mutation (None if never mutated).
        update_count: Number of successful mutations.
    """

    events: list[CalendarEvent] = Field(
        default_factory=list, description="Committed events in insertion order"
    )
    last_updated: Optional[datetime] = Field(
        default=None, description="Local time of the last mutation"
    )
    update_count: int = Field(default=0, description="Number of mutations")

    @property
    def event_count(self) -> int:
        """Number of events in the store."""
        return len(self.events)

    def _next_id(self) -> int:
        if not self.events:
            return 1
        return max(event.event_id for event in self.events) + 1

    def _index_of(self, event_id: int) -> Optional[int]:
        for index, event in enumerate(self.events):
            if event.event_id == event_id:
                return index
        return None

    def _find_conflict(
        self, candidate: CalendarEvent, exclude_id: Optional[int]
    ) -> Optional[CalendarEvent]:
        for event in self.events:
            if event.event_id == exclude_id:
                continue
            if overlaps(candidate.start, candidate.end, event.start, event.end):
                return event
        return None

    def _touch(self) -> None:
        self.last_updated = datetime.now()
        self.update_count += 1

    def get(self, event_id: int) -> Optional[CalendarEvent]:
        """Get event by id.

        Args:
            event_id: Event identifier.

        Returns:
            CalendarEvent object or None if not found.
        """
        index = self._index_of(event_id)
        if index is None:
            return None
        return self.events[index]

    def add(self, draft: EventDraft) -> CalendarEvent:
        """Commit a new event and assign it an id.

        Any event_id on the draft is ignored; the store always assigns
        max(existing ids) + 1, or 1 when empty.

        Args:
            draft: Event fields to commit.

        Returns:
            The stored event.

        Raises:
            ValueError: If the draft's end is not after its start.
            EventOverlapError: If the event would overlap a stored event.
        """
        event = CalendarEvent(
            event_id=self._next_id(),
            title=draft.title,
            description=draft.description,
            start=draft.start,
            end=draft.end,
        )

        conflict = self._find_conflict(event, exclude_id=None)
        if conflict is not None:
            raise EventOverlapError(None, conflict.event_id)

        self.events.append(event)
        self._touch()
        logger.info(f"Added event {event.get_summary()}")
        return event

    def update(self, event_id: int, fields: dict[str, Any]) -> CalendarEvent:
        """Replace fields of an existing event.

        Args:
            event_id: Id of the event to update.
            fields: Mapping of field name to new value. Allowed keys are
                title, description, start and end.

        Returns:
            The updated event.

        Raises:
            EventNotFoundError: If no event has this id.
            ValueError: If fields contain unknown keys or an invalid range.
            EventOverlapError: If the updated event would overlap another one.
        """
        index = self._index_of(event_id)
        if index is None:
            raise EventNotFoundError(event_id)

        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        current = self.events[index]
        values = {name: getattr(current, name) for name in EDITABLE_FIELDS}
        values.update(fields)
        updated = CalendarEvent(event_id=event_id, **values)

        conflict = self._find_conflict(updated, exclude_id=event_id)
        if conflict is not None:
            raise EventOverlapError(event_id, conflict.event_id)

        self.events[index] = updated
        self._touch()
        logger.info(f"Updated event {updated.get_summary()}")
        return updated

    def remove(self, event_id: int) -> None:
        """Remove an event if present.

        Removing an id that is not in the store is a no-op.

        Args:
            event_id: Id of the event to remove.
        """
        index = self._index_of(event_id)
        if index is None:
            logger.debug(f"Remove ignored: event {event_id} not in store")
            return

        removed = self.events.pop(index)
        self._touch()
        logger.info(f"Removed event {removed.get_summary()}")

    def clear(self) -> None:
        """Remove all events and reset modification tracking."""
        self.events.clear()
        self.last_updated = None
        self.update_count = 0

    def query(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        """Query events by time range and text.

        Args:
            start: Only events ending after this time.
            end: Only events starting before this time.
            search: Case-insensitive text searched in title and description.
            limit: Maximum number of results to return.
            offset: Number of results to skip (for pagination).

        Returns:
            Dictionary with matching events containing:
                - events: List of CalendarEvent objects sorted by start.
                - count: Number of events returned (after pagination).
                - total_count: Total number of matching events.
        """
        search_text = (search or "").lower()
        matching_events = []

        for event in self.list():
            if start is not None and event.end <= start:
                continue
            if end is not None and event.start >= end:
                continue
            if search_text:
                searchable = f"{event.title} {event.description}".lower()
                if search_text not in searchable:
                    continue
            matching_events.append(event)

        total_count = len(matching_events)

        if offset:
            matching_events = matching_events[offset:]
        if limit:
            matching_events = matching_events[:limit]

        return {
            "events": matching_events,
            "count": len(matching_events),
            "total_count": total_count,
        }

    def get_snapshot(self) -> dict[str, Any]:
        """Get complete store snapshot.

        Returns:
            Dictionary containing all events and modification metadata.
        """
        return {
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
            "update_count": self.update_count,
            "event_count": self.event_count,
            "events": [event.model_dump(mode="json") for event in self.list()],
        }

    def validate_state(self) -> list[str]:
        """Validate store consistency.

        Checks that ids are unique, every event ends after it starts and no
        two events overlap.

        Returns:
            List of validation error messages (empty list if valid).
        """
        errors = []
        seen_ids: set[int] = set()

        for event in self.events:
            if event.event_id in seen_ids:
                errors.append(f"Duplicate event id {event.event_id}")
            seen_ids.add(event.event_id)

            if event.end <= event.start:
                errors.append(
                    f"Event {event.event_id} has invalid time range: {event.start} to {event.end}"
                )

        for i, first in enumerate(self.events):
            for second in self.events[i + 1:]:
                if overlaps(first.start, first.end, second.start, second.end):
                    errors.append(
                        f"Events {first.event_id} and {second.event_id} overlap"
                    )

        return errors

    def list(self) -> list[CalendarEvent]:
        """Return a snapshot of all events ordered by start time.

        The returned list is a copy; appending to or removing from it does
        not change the store. Events are pydantic models and must be treated
        as read-only.

        Returns:
            Events sorted by start, then id.
        """
        return sorted(self.events, key=lambda e: (e.start, e.event_id))
