"""Availability endpoints.

Advisory queries the grid layer makes on every render: which slots to gray
out, how to shade each day, and the month grid for the mini calendar.
"""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from api.dependencies import CalendarSessionDep
from api.models import (
    DayAvailabilityResponse,
    GridDayResponse,
    MonthGridResponse,
    OverlapResponse,
    SlotResponse,
)
from models.availability import classify_day, day_slots, is_slot_disabled
from models.clock import to_local_naive
from models.interval import SLOT_PROBE_DURATION, overlaps
from models.month_grid import month_grid, month_start, shift_month

router = APIRouter(
    prefix="/availability",
    tags=["availability"],
)


# Request Models


class OverlapRequest(BaseModel):
    """Request to evaluate the overlap predicate on two intervals.

    Args:
        a_start: Start of the first interval.
        a_end: End of the first interval.
        b_start: Start of the second interval.
        b_end: End of the second interval.
    """

    a_start: datetime = Field(description="Start of the first interval")
    a_end: datetime = Field(description="End of the first interval")
    b_start: datetime = Field(description="Start of the second interval")
    b_end: datetime = Field(description="End of the second interval")


# Route Handlers


@router.get("/slot", response_model=SlotResponse)
async def get_slot(
    session: CalendarSessionDep,
    start: datetime = Query(description="Slot start time"),
):
    """Check whether a single grid slot is disabled.

    Args:
        session: Calendar session dependency.
        start: Slot start time.

    Returns:
        The slot with its disabled flag.
    """
    start = to_local_naive(start)
    return SlotResponse(
        start=start,
        end=start + SLOT_PROBE_DURATION,
        disabled=is_slot_disabled(start, session.store.list(), session.clock.now()),
    )


@router.get("/day", response_model=DayAvailabilityResponse)
async def get_day(
    session: CalendarSessionDep,
    day: date = Query(description="Day to slice into slots"),
    slot_minutes: int = Query(default=30, gt=0, le=1440, description="Grid step in minutes"),
):
    """List a day's slots with their disabled flags.

    Args:
        session: Calendar session dependency.
        day: The day.
        slot_minutes: Grid step in minutes.

    Returns:
        The day's status and slots.

    Raises:
        ValueError: If slot_minutes does not evenly divide a day (400).
    """
    now = session.clock.now()
    slots = day_slots(day, session.store.list(), now, slot_minutes=slot_minutes)
    return DayAvailabilityResponse(
        day=day,
        status=classify_day(day, now).value,
        slots=[SlotResponse(**slot.model_dump()) for slot in slots],
    )


@router.get("/month", response_model=MonthGridResponse)
async def get_month(
    session: CalendarSessionDep,
    month: Optional[date] = Query(default=None, description="Any date in the month (default: today)"),
    selected: Optional[date] = Query(default=None, description="Selected date to flag"),
):
    """Build the Sunday-first month grid.

    Args:
        session: Calendar session dependency.
        month: Any date in the month to display.
        selected: The selected date.

    Returns:
        Month grid with navigation targets.
    """
    today = session.clock.now().date()
    first = month_start(month or today)
    cells = month_grid(first, today=today, selected=selected)
    return MonthGridResponse(
        month=first,
        previous_month=shift_month(first, -1),
        next_month=shift_month(first, 1),
        days=[
            GridDayResponse(
                day=cell.day,
                in_month=cell.in_month,
                status=cell.status.value,
                is_selected=cell.is_selected,
            )
            for cell in cells
        ],
    )


@router.post("/overlap", response_model=OverlapResponse)
async def check_overlap(request: OverlapRequest):
    """Evaluate the half-open interval overlap predicate.

    Args:
        request: The two intervals.

    Returns:
        Whether they overlap.
    """
    return OverlapResponse(
        overlaps=overlaps(
            to_local_naive(request.a_start),
            to_local_naive(request.a_end),
            to_local_naive(request.b_start),
            to_local_naive(request.b_end),
        )
    )
