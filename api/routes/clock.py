"""Clock control endpoints.

These endpoints let clients pin, move and release the time the booking core
treats as "now". A pinned clock makes past/future decisions reproducible.
"""

from datetime import datetime, timedelta

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CalendarSessionDep
from api.models import ClockResponse

router = APIRouter(
    prefix="/clock",
    tags=["clock"],
)


class SetClockRequest(BaseModel):
    """Request model for pinning the clock.

    Attributes:
        current_time: Time to pin the clock to.
    """

    current_time: datetime = Field(description="Time to pin the clock to")


class AdvanceClockRequest(BaseModel):
    """Request model for advancing a pinned clock.

    Attributes:
        seconds: Number of seconds to advance.
    """

    seconds: float = Field(
        ...,
        gt=0,
        description="Number of seconds to advance (must be positive)",
    )


@router.get("", response_model=ClockResponse)
async def get_clock(session: CalendarSessionDep):
    """Get the current time as seen by the booking core.

    Args:
        session: Calendar session dependency.

    Returns:
        Current time and whether it is pinned.
    """
    return ClockResponse(**session.clock.to_dict())


@router.post("/set", response_model=ClockResponse)
async def set_clock(request: SetClockRequest, session: CalendarSessionDep):
    """Pin the clock to a specific time.

    Args:
        request: Time to pin.
        session: Calendar session dependency.

    Returns:
        The updated clock.
    """
    session.clock.set_time(request.current_time)
    return ClockResponse(**session.clock.to_dict())


@router.post("/advance", response_model=ClockResponse)
async def advance_clock(request: AdvanceClockRequest, session: CalendarSessionDep):
    """Move a pinned clock forward.

    Args:
        request: Seconds to advance.
        session: Calendar session dependency.

    Returns:
        The updated clock.

    Raises:
        ValueError: If the clock is not pinned (400).
    """
    session.clock.advance(timedelta(seconds=request.seconds))
    return ClockResponse(**session.clock.to_dict())


@router.post("/release", response_model=ClockResponse)
async def release_clock(session: CalendarSessionDep):
    """Unpin the clock so it follows the system time again.

    Args:
        session: Calendar session dependency.

    Returns:
        The updated clock.
    """
    session.clock.release()
    return ClockResponse(**session.clock.to_dict())
