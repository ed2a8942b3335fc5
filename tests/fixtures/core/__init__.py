"""Core booking fixtures."""

from tests.fixtures.core.events import (
    NOW,
    STANDARD_DRAFTS,
    at,
    create_calendar_event,
    create_event_draft,
)
from tests.fixtures.core.sessions import (
    create_event_store,
    create_session,
)

__all__ = [
    "NOW",
    "STANDARD_DRAFTS",
    "at",
    "create_calendar_event",
    "create_event_draft",
    "create_event_store",
    "create_session",
]
