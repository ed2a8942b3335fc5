"""Event listing endpoints.

Provides read-only access to committed events for rendering the calendar.
Events are created, changed and deleted only through the /workflow endpoints.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query

from api.dependencies import CalendarSessionDep
from api.models import EventListResponse, EventResponse
from models.clock import to_local_naive
from models.exceptions import EventNotFoundError

router = APIRouter(
    prefix="/events",
    tags=["events"],
)


@router.get("", response_model=EventListResponse)
async def list_events(
    session: CalendarSessionDep,
    start: Optional[datetime] = Query(default=None, description="Only events ending after this time"),
    end: Optional[datetime] = Query(default=None, description="Only events starting before this time"),
    search: Optional[str] = Query(default=None, description="Text search in title/description"),
    limit: Optional[int] = Query(default=None, ge=1, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
):
    """List committed events, sorted by start time.

    Args:
        session: Calendar session dependency.
        start: Range start filter.
        end: Range end filter.
        search: Text search filter.
        limit: Maximum number of results.
        offset: Pagination offset.

    Returns:
        Matching events with counts.
    """
    result = session.store.query(
        start=to_local_naive(start) if start else None,
        end=to_local_naive(end) if end else None,
        search=search,
        limit=limit,
        offset=offset,
    )
    return EventListResponse(
        events=[EventResponse(**event.model_dump()) for event in result["events"]],
        count=result["count"],
        total_count=result["total_count"],
    )


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: int, session: CalendarSessionDep):
    """Get a single event by id.

    Args:
        event_id: Event identifier.
        session: Calendar session dependency.

    Returns:
        The event.

    Raises:
        EventNotFoundError: If no event has this id (404).
    """
    event = session.store.get(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return EventResponse(**event.model_dump())
