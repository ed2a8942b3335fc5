"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared CalendarSession.
"""

from typing import Annotated

from fastapi import Depends

from config import BookingSettings
from models.session import CalendarSession


# Global state
# Events live only for the process lifetime, so one in-memory session is
# created when the app starts and shared by every request.
_session: CalendarSession | None = None


def get_calendar_session() -> CalendarSession:
    """Get the shared CalendarSession instance.

    This function is a FastAPI dependency. When you add it to a route handler's
    parameters, FastAPI will automatically call this function and inject the result.

    Returns:
        The shared CalendarSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.

    Example:
        @router.get("/some-endpoint")
        async def my_handler(session: Annotated[CalendarSession, Depends(get_calendar_session)]):
            return {"events": len(session.store.list())}
    """
    if _session is None:
        raise RuntimeError(
            "CalendarSession not initialized. Call initialize_calendar_session() first."
        )

    return _session


def initialize_calendar_session(
    settings: BookingSettings | None = None,
) -> CalendarSession:
    """Initialize the shared CalendarSession instance.

    This should be called once when the FastAPI app starts up.

    Args:
        settings: Service settings (defaults to built-in defaults).

    Returns:
        The newly created CalendarSession instance.
    """
    global _session

    settings = settings or BookingSettings()
    _session = CalendarSession.create(
        fixed_time=settings.fixed_now,
        seed_demo_events=settings.seed_demo_events,
    )

    return _session


def shutdown_calendar_session() -> None:
    """Discard the shared CalendarSession.

    This should be called when the FastAPI app shuts down. All events are
    dropped with it.
    """
    global _session

    _session = None


# Type alias for dependency injection
# This makes the type annotation cleaner in route handlers
CalendarSessionDep = Annotated[CalendarSession, Depends(get_calendar_session)]
