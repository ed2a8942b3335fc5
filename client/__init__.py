"""Booking calendar API client library.

A typed Python client for the booking calendar REST API.

Example:
    from client import BookingClient

    with BookingClient(base_url="http://localhost:8000") as client:
        for event in client.events.list().events:
            print(event.title)

Exports:
    BookingClient: Synchronous client for the booking API.

    Exceptions:
        BookingClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Event not found (HTTP 404).
        ConflictError: State conflict (HTTP 409).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._availability import AvailabilityClient
from client._clock import ClockClient
from client._events import EventsClient
from client._workflow import WorkflowClient
from client.client import BookingClient
from client.exceptions import (
    APIError,
    BookingClientError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from client.models import (
    ClockResponse,
    ConfirmResponse,
    DayAvailabilityResponse,
    DraftResponse,
    EventListResponse,
    EventResponse,
    GridDayResponse,
    HealthResponse,
    MonthGridResponse,
    SlotResponse,
    SlotSelectionResponse,
    SubmitResponse,
    WorkflowStateResponse,
)

__all__ = [
    # Main client
    "BookingClient",
    # Sub-clients
    "AvailabilityClient",
    "ClockClient",
    "EventsClient",
    "WorkflowClient",
    # Exceptions
    "APIError",
    "BookingClientError",
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "ServerError",
    "TimeoutError",
    "ValidationError",
    # Models
    "ClockResponse",
    "ConfirmResponse",
    "DayAvailabilityResponse",
    "DraftResponse",
    "EventListResponse",
    "EventResponse",
    "GridDayResponse",
    "HealthResponse",
    "MonthGridResponse",
    "SlotResponse",
    "SlotSelectionResponse",
    "SubmitResponse",
    "WorkflowStateResponse",
]
