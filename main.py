"""Main entry point for the booking calendar FastAPI application.

This module creates and configures the FastAPI app instance that serves the REST API
for browsing availability and booking, editing and deleting calendar events.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_calendar_session, shutdown_calendar_session
from api.exceptions import (
    event_not_found_handler,
    generic_exception_handler,
    validation_exception_handler,
    value_error_handler,
    workflow_state_handler,
)
from api.routes import availability as availability_routes
from api.routes import clock as clock_routes
from api.routes import events as events_routes
from api.routes import workflow as workflow_routes
from config import BookingSettings, configure_logging
from models.exceptions import EventNotFoundError, WorkflowStateError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Settings are read from the environment at startup, then the shared
    calendar session is created. It is discarded again at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = BookingSettings.from_env()
    configure_logging(settings)

    session = initialize_calendar_session(settings)
    logger.info(
        f"Calendar session initialized with {session.store.event_count} events "
        f"(clock {'pinned' if session.clock.is_fixed else 'live'})"
    )

    yield  # App runs and handles requests here

    shutdown_calendar_session()
    logger.info("Calendar session discarded")


app = FastAPI(
    title="Booking Calendar",
    description="API for viewing availability and booking non-overlapping calendar events",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Order matters: specific exceptions before general ones
app.add_exception_handler(EventNotFoundError, event_not_found_handler)
app.add_exception_handler(WorkflowStateError, workflow_state_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register route modules
app.include_router(events_routes.router)
app.include_router(availability_routes.router)
app.include_router(workflow_routes.router)
app.include_router(clock_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message.

    Returns:
        A dictionary with a welcome message.
    """
    return {
        "message": "Welcome to the Booking Calendar API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring.

    Returns:
        A dictionary indicating the service is healthy.
    """
    return {"status": "healthy"}
