"""Shared request and response models for API endpoints.

This module contains the models used across the booking route handlers. The
client library re-exports the response models so both sides share one schema.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class EventResponse(BaseModel):
    """A committed calendar event.

    Attributes:
        event_id: Unique integer id.
        title: Event title.
        description: Event description.
        start: Start time (local wall clock).
        end: End time (local wall clock).
    """

    event_id: int
    title: str
    description: str = ""
    start: datetime
    end: datetime


class EventListResponse(BaseModel):
    """Response model for event listing.

    Attributes:
        events: Events sorted by start time (after pagination).
        count: Number of events returned.
        total_count: Number of events matching the query before pagination.
    """

    events: list[EventResponse]
    count: int
    total_count: int


class DraftResponse(BaseModel):
    """The workflow candidate.

    Attributes:
        event_id: Id of the edited event (None when creating).
        title: Candidate title.
        description: Candidate description.
        start: Candidate start time.
        end: Candidate end time.
    """

    event_id: Optional[int] = None
    title: str = ""
    description: str = ""
    start: datetime
    end: datetime


class WorkflowStateResponse(BaseModel):
    """Displayable state of the edit workflow.

    Attributes:
        phase: "idle", "editing" or "confirm_pending".
        candidate: The draft being edited, if any.
        is_new: Whether the candidate is a new event.
        exclude_id: Id of the edited event.
        error: Validation message to display inline.
        pending_action: "create", "update" or "delete" while confirming.
        confirmation_prompt: Question for the confirmation dialog.
        notice: Message from the last rejected slot selection.
    """

    phase: str
    candidate: Optional[DraftResponse] = None
    is_new: Optional[bool] = None
    exclude_id: Optional[int] = None
    error: Optional[str] = None
    pending_action: Optional[str] = None
    confirmation_prompt: Optional[str] = None
    notice: Optional[str] = None


class SubmitResponse(BaseModel):
    """Response model for candidate submission.

    Attributes:
        is_valid: Whether the candidate passed validation.
        reason: First failing rule's message (None if valid).
        workflow: Workflow state after the submission.
    """

    is_valid: bool
    reason: Optional[str] = None
    workflow: WorkflowStateResponse


class ConfirmResponse(BaseModel):
    """Response model for a confirmed mutation.

    Attributes:
        action: The mutation that was performed.
        event: The created or updated event (None for deletions and vanished targets).
        workflow: Workflow state after the confirmation.
    """

    action: str
    event: Optional[EventResponse] = None
    workflow: WorkflowStateResponse


class SlotSelectionResponse(BaseModel):
    """Response model for a grid slot selection.

    Attributes:
        accepted: Whether the edit dialog was opened.
        notice: Rejection message shown instead of the dialog.
        workflow: Workflow state after the selection.
    """

    accepted: bool
    notice: Optional[str] = None
    workflow: WorkflowStateResponse


class SlotResponse(BaseModel):
    """Disabled state of one grid slot.

    Attributes:
        start: Slot start time.
        end: End of the probe interval.
        disabled: Whether the slot is unavailable.
    """

    start: datetime
    end: datetime
    disabled: bool


class DayAvailabilityResponse(BaseModel):
    """Response model for one day's slots.

    Attributes:
        day: The day.
        status: "past", "today" or "future".
        slots: Slots of the day in order.
    """

    day: date
    status: str
    slots: list[SlotResponse]


class GridDayResponse(BaseModel):
    """One cell of the month grid.

    Attributes:
        day: The date.
        in_month: Whether the date is in the displayed month.
        status: "past", "today" or "future".
        is_selected: Whether the date is selected.
    """

    day: date
    in_month: bool
    status: str
    is_selected: bool = False


class MonthGridResponse(BaseModel):
    """Response model for a month grid.

    Attributes:
        month: First day of the displayed month.
        previous_month: First day of the previous month.
        next_month: First day of the next month.
        days: Grid cells, whole Sunday-first weeks.
    """

    month: date
    previous_month: date
    next_month: date
    days: list[GridDayResponse]


class OverlapResponse(BaseModel):
    """Response model for the overlap predicate.

    Attributes:
        overlaps: Whether the two intervals overlap.
    """

    overlaps: bool


class ClockResponse(BaseModel):
    """Response model for the session clock.

    Attributes:
        current_time: Current local time as seen by the booking core.
        is_fixed: Whether the clock is pinned.
    """

    current_time: datetime
    is_fixed: bool

