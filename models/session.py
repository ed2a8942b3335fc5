"""Calendar session - container for one user's clock, events and workflow."""

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from models.clock import CalendarClock
from models.event import EventDraft
from models.store import EventStore
from models.workflow import EventEditWorkflow

logger = logging.getLogger(__name__)


# Events the calendar starts with when demo seeding is enabled.
DEMO_EVENTS = [
    EventDraft(
        title="Demo Meeting",
        description="Initial demo event",
        start=datetime(2025, 5, 20, 10, 0),
        end=datetime(2025, 5, 20, 11, 0),
    ),
    EventDraft(
        title="Bijan Test3",
        start=datetime(2025, 5, 16, 15, 30),
        end=datetime(2025, 5, 16, 16, 0),
    ),
    EventDraft(
        title="Bijan Test2",
        start=datetime(2025, 5, 18, 0, 30),
        end=datetime(2025, 5, 18, 1, 0),
    ),
    EventDraft(
        title="Demo check",
        description="demo meeting 1",
        start=datetime(2025, 5, 21, 2, 31),
        end=datetime(2025, 5, 21, 3, 0),
    ),
    EventDraft(
        title="demo meeting 2",
        description="demo meeting 2",
        start=datetime(2025, 5, 21, 3, 0),
        end=datetime(2025, 5, 21, 3, 30),
    ),
    EventDraft(
        title="Demo meeting 3",
        description="demo ",
        start=datetime(2025, 5, 21, 4, 0),
        end=datetime(2025, 5, 21, 4, 30),
    ),
]


class CalendarSession(BaseModel):
    """Everything one calendar user works with during a process lifetime.

    The session is a passive container: the workflow mutates the store, and
    the API layer reads from all three parts. The workflow must share the
    session's store and clock.

    Args:
        clock: The session clock.
        store: The session's events.
        workflow: The edit workflow writing to the store.

    Example:
        >>> session = CalendarSession.create(fixed_time=datetime(2025, 5, 21, 9, 0))
        >>> session.workflow.open_for_create(datetime(2025, 5, 21, 10, 0))
        >>> session.workflow.edit_candidate(title="Standup")
        >>> session.workflow.submit()
        >>> session.workflow.confirm()
    """

    clock: CalendarClock = Field(description="The session clock")
    store: EventStore = Field(description="The session's events")
    workflow: EventEditWorkflow = Field(description="The edit workflow")

    @model_validator(mode="after")
    def validate_shared_parts(self) -> "CalendarSession":
        """Ensure the workflow writes to this session's store and clock.

        Raises:
            ValueError: If the workflow holds a different store or clock.
        """
        if self.workflow.store is not self.store:
            raise ValueError("Workflow must use the session's event store")
        if self.workflow.clock is not self.clock:
            raise ValueError("Workflow must use the session's clock")
        return self

    @classmethod
    def create(
        cls,
        fixed_time: Optional[datetime] = None,
        seed_demo_events: bool = False,
    ) -> "CalendarSession":
        """Build a fresh session.

        Args:
            fixed_time: Pin the clock to this time (None follows the system clock).
            seed_demo_events: Whether to preload the demo events.

        Returns:
            A new session with an idle workflow.
        """
        clock = CalendarClock(fixed_time=fixed_time)
        store = EventStore()
        workflow = EventEditWorkflow(store=store, clock=clock)
        session = cls(clock=clock, store=store, workflow=workflow)

        if seed_demo_events:
            session.seed(DEMO_EVENTS)

        return session

    def seed(self, drafts: list[EventDraft]) -> None:
        """Load events directly into the store, bypassing the workflow.

        Seed data is not subject to the past-start or duration rules; it
        must still be free of overlaps.

        Args:
            drafts: Events to add, in order.
        """
        for draft in drafts:
            self.store.add(draft)
        logger.info(f"Seeded {len(drafts)} events")

    def reset(self) -> None:
        """Close any open dialog and remove all events."""
        self.workflow.close_without_saving()
        self.workflow.notice = None
        self.store.clear()

    def get_snapshot(self) -> dict[str, Any]:
        """Get complete session snapshot.

        Returns:
            Dictionary with clock, store and workflow state.
        """
        return {
            "clock": self.clock.to_dict(),
            "store": self.store.get_snapshot(),
            "workflow": self.workflow.get_snapshot(),
        }
