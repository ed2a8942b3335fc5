"""Exception handlers for the booking calendar FastAPI application.

This module converts booking core exceptions into consistent, user-friendly
JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from models.exceptions import EventNotFoundError, WorkflowStateError

logger = logging.getLogger(__name__)


# Exception Handlers
# These convert exceptions into JSON responses


async def event_not_found_handler(request: Request, exc: EventNotFoundError):
    """Handle EventNotFoundError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The EventNotFoundError exception.

    Returns:
        JSONResponse with 404 status and the requested id.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Event Not Found",
            "detail": str(exc),
            "event_id": exc.event_id,
        },
    )


async def workflow_state_handler(request: Request, exc: WorkflowStateError):
    """Handle WorkflowStateError exceptions.

    Returns a 409 (Conflict): the requested transition is not available in
    the workflow's current state.

    Args:
        request: The incoming request that triggered the error.
        exc: The WorkflowStateError exception.

    Returns:
        JSONResponse with 409 status.
    """
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": "Invalid Workflow Transition",
            "detail": str(exc),
            "state": exc.state,
            "suggestion": "Check GET /workflow for the current state",
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors.

    These occur when data built inside a handler doesn't match a model.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False, include_context=False),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    ValueErrors indicate invalid input values that passed request validation
    but were rejected by the booking core.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValueError exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    This is a catch-all handler for unexpected errors. It prevents
    stack traces from being exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
