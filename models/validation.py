"""Ordered validation rules deciding whether a candidate event may be committed.

The rules run in a fixed order and stop at the first failure, so a user who
makes several mistakes at once always sees the same single message:

1. Title must not be blank.
2. Start must not be in the past.
3. End must be after start.
4. Event must last at least 15 minutes.
5. Event must not overlap any other event.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, Field

from models.clock import to_local_naive
from models.event import CalendarEvent, EventDraft
from models.interval import MIN_EVENT_DURATION, overlaps

TITLE_EMPTY = "Title cannot be empty."
START_IN_PAST = "Start time cannot be in the past."
END_NOT_AFTER_START = "End time must be after start time."
TOO_SHORT = "Event must be at least 15 minutes long."
OVERLAPS_OTHER = "This event overlaps with another event. Please choose a different time."


class ValidationResult(BaseModel):
    """Outcome of validating a candidate: Valid, or Invalid with a reason.

    Args:
        is_valid: Whether every rule passed.
        reason: User-facing message of the first failing rule (None if valid).
    """

    is_valid: bool = Field(description="Whether every rule passed")
    reason: Optional[str] = Field(
        default=None, description="Message of the first failing rule"
    )

    @classmethod
    def valid(cls) -> "ValidationResult":
        """Build a passing result."""
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        """Build a failing result carrying the user-facing reason."""
        return cls(is_valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.is_valid


# A rule returns the failure message, or None when the candidate passes.
Rule = Callable[[EventDraft, datetime, list[CalendarEvent]], Optional[str]]


def _check_title(
    candidate: EventDraft, now: datetime, others: list[CalendarEvent]
) -> Optional[str]:
    if not candidate.title.strip():
        return TITLE_EMPTY
    return None


def _check_not_in_past(
    candidate: EventDraft, now: datetime, others: list[CalendarEvent]
) -> Optional[str]:
    if candidate.start < now:
        return START_IN_PAST
    return None


def _check_end_after_start(
    candidate: EventDraft, now: datetime, others: list[CalendarEvent]
) -> Optional[str]:
    if candidate.end <= candidate.start:
        return END_NOT_AFTER_START
    return None


def _check_min_duration(
    candidate: EventDraft, now: datetime, others: list[CalendarEvent]
) -> Optional[str]:
    if candidate.end - candidate.start < MIN_EVENT_DURATION:
        return TOO_SHORT
    return None


def _check_no_overlap(
    candidate: EventDraft, now: datetime, others: list[CalendarEvent]
) -> Optional[str]:
    for other in others:
        if overlaps(candidate.start, candidate.end, other.start, other.end):
            return OVERLAPS_OTHER
    return None


# Order matters: it decides which message wins when several rules fail.
RULES: tuple[Rule, ...] = (
    _check_title,
    _check_not_in_past,
    _check_end_after_start,
    _check_min_duration,
    _check_no_overlap,
)


def validate_event(
    candidate: EventDraft,
    exclude_id: Optional[int],
    existing_events: Iterable[CalendarEvent],
    now: Optional[datetime] = None,
) -> ValidationResult:
    """Run the rule chain against a candidate event.

    The event whose id equals exclude_id (the event being edited) is left out
    of the overlap check, so an edit never conflicts with its own previous
    times.

    Args:
        candidate: The draft to validate.
        exclude_id: Id of the event being edited, or None when creating.
        existing_events: Committed events to check for overlaps.
        now: Current local time. Read from the system clock when None, at
            call time, so every resubmission sees a fresh reading.

    Returns:
        ValidationResult.valid() or ValidationResult.invalid(reason).
    """
    now = datetime.now() if now is None else to_local_naive(now)

    others = [event for event in existing_events if event.event_id != exclude_id]

    for rule in RULES:
        reason = rule(candidate, now, others)
        if reason is not None:
            return ValidationResult.invalid(reason)

    return ValidationResult.valid()
