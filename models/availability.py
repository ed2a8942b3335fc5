"""Advisory slot and day availability for grid rendering.

Nothing here gates a commit: the validation rules are the authoritative check.
These helpers only tell the grid which cells to gray out, and reject raw slot
clicks before the edit dialog is opened.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from models.clock import to_local_naive
from models.event import CalendarEvent
from models.exceptions import PastSlotSelectionError, SlotOverlapError
from models.interval import SLOT_PROBE_DURATION, overlaps


class DayStatus(str, Enum):
    """Render-only classification of a calendar day relative to today."""

    PAST = "past"
    TODAY = "today"
    FUTURE = "future"


class SlotAvailability(BaseModel):
    """Disabled state of one grid slot.

    Args:
        start: Slot start time.
        end: End of the probe interval used for the overlap check.
        disabled: Whether the slot should be rendered as unavailable.
    """

    start: datetime = Field(description="Slot start time")
    end: datetime = Field(description="End of the probe interval")
    disabled: bool = Field(description="Whether the slot is unavailable")


def _as_date(day: date | datetime) -> date:
    if isinstance(day, datetime):
        return to_local_naive(day).date()
    return day


def is_slot_disabled(
    slot_start: datetime,
    events: Iterable[CalendarEvent],
    now: Optional[datetime] = None,
) -> bool:
    """Check whether a grid slot should be grayed out.

    A slot is disabled when it starts in the past, or when a 30-minute probe
    interval starting at the slot overlaps any event.

    Args:
        slot_start: Start of the slot.
        events: Committed events.
        now: Current local time (system clock when None).

    Returns:
        True if the slot is disabled.
    """
    now = datetime.now() if now is None else to_local_naive(now)
    slot_start = to_local_naive(slot_start)

    if slot_start < now:
        return True

    probe_end = slot_start + SLOT_PROBE_DURATION
    return any(
        overlaps(slot_start, probe_end, event.start, event.end) for event in events
    )


def classify_day(day: date | datetime, today: Optional[date | datetime] = None) -> DayStatus:
    """Classify a day as past, today or future.

    Both values are compared as calendar dates, i.e. normalized to midnight.

    Args:
        day: The day to classify.
        today: The current day (system date when None).

    Returns:
        The DayStatus of the day.
    """
    day_date = _as_date(day)
    today_date = date.today() if today is None else _as_date(today)

    if day_date < today_date:
        return DayStatus.PAST
    if day_date == today_date:
        return DayStatus.TODAY
    return DayStatus.FUTURE


def is_day_past(day: date | datetime, today: Optional[date | datetime] = None) -> bool:
    """Whether the day is strictly before today."""
    return classify_day(day, today) is DayStatus.PAST


def is_day_today(day: date | datetime, today: Optional[date | datetime] = None) -> bool:
    """Whether the day is today."""
    return classify_day(day, today) is DayStatus.TODAY


def check_slot_selection(
    start: datetime,
    end: datetime,
    events: Iterable[CalendarEvent],
    now: Optional[datetime] = None,
) -> None:
    """Reject a raw grid selection before the edit dialog opens.

    Unlike is_slot_disabled, the selection is checked with its own end time
    rather than the fixed probe duration.

    Args:
        start: Start of the selected range.
        end: End of the selected range.
        events: Committed events.
        now: Current local time (system clock when None).

    Raises:
        PastSlotSelectionError: If the selection starts in the past.
        SlotOverlapError: If the selection overlaps an event.
    """
    now = datetime.now() if now is None else to_local_naive(now)
    start = to_local_naive(start)
    end = to_local_naive(end)

    if start < now:
        raise PastSlotSelectionError()

    for event in events:
        if overlaps(start, end, event.start, event.end):
            raise SlotOverlapError()


def day_slots(
    day: date | datetime,
    events: Iterable[CalendarEvent],
    now: Optional[datetime] = None,
    slot_minutes: int = 30,
) -> list[SlotAvailability]:
    """List every slot of a day with its disabled state.

    Used to shade the week and day views.

    Args:
        day: The day to slice.
        events: Committed events.
        now: Current local time (system clock when None).
        slot_minutes: Grid step in minutes (must divide a day evenly).

    Returns:
        Slots from midnight to the end of the day, in order.

    Raises:
        ValueError: If slot_minutes does not divide 24 hours into whole slots.
    """
    if slot_minutes <= 0 or (24 * 60) % slot_minutes != 0:
        raise ValueError(f"slot_minutes must evenly divide a day, got {slot_minutes}")

    now = datetime.now() if now is None else to_local_naive(now)
    events = list(events)
    midnight = datetime.combine(_as_date(day), datetime.min.time())
    step = timedelta(minutes=slot_minutes)

    slots = []
    for index in range((24 * 60) // slot_minutes):
        slot_start = midnight + index * step
        slots.append(
            SlotAvailability(
                start=slot_start,
                end=slot_start + SLOT_PROBE_DURATION,
                disabled=is_slot_disabled(slot_start, events, now),
            )
        )
    return slots
