"""Booking calendar core models package.

This package contains the booking core: the interval overlap predicate, the
in-memory event store, the ordered validation rules, advisory slot and day
availability, and the edit workflow that gates every mutation behind an
explicit confirmation.
"""

from models.availability import (
    DayStatus,
    SlotAvailability,
    check_slot_selection,
    classify_day,
    day_slots,
    is_day_past,
    is_day_today,
    is_slot_disabled,
)
from models.clock import CalendarClock
from models.event import CalendarEvent, EventDraft
from models.exceptions import (
    EventNotFoundError,
    EventOverlapError,
    PastSlotSelectionError,
    SlotOverlapError,
    SlotUnavailableError,
    WorkflowStateError,
)
from models.interval import overlaps
from models.month_grid import GridDay, month_grid
from models.session import CalendarSession
from models.store import EventStore
from models.validation import ValidationResult, validate_event
from models.workflow import EventEditWorkflow, PendingAction

__all__ = [
    "CalendarClock",
    "CalendarEvent",
    "EventDraft",
    "EventStore",
    "overlaps",
    "validate_event",
    "ValidationResult",
    "is_slot_disabled",
    "is_day_past",
    "is_day_today",
    "classify_day",
    "check_slot_selection",
    "day_slots",
    "DayStatus",
    "SlotAvailability",
    "GridDay",
    "month_grid",
    "EventEditWorkflow",
    "PendingAction",
    "CalendarSession",
    "EventNotFoundError",
    "EventOverlapError",
    "WorkflowStateError",
    "SlotUnavailableError",
    "PastSlotSelectionError",
    "SlotOverlapError",
]
