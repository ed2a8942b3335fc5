"""Response models for the booking calendar client.

The client parses responses into the same models the API layer returns,
plus a few client-specific models for endpoints defined in main.py.
"""

from pydantic import BaseModel, Field

from api.models import (
    ClockResponse,
    ConfirmResponse,
    DayAvailabilityResponse,
    DraftResponse,
    EventListResponse,
    EventResponse,
    GridDayResponse,
    MonthGridResponse,
    OverlapResponse,
    SlotResponse,
    SlotSelectionResponse,
    SubmitResponse,
    WorkflowStateResponse,
)

__all__ = [
    # Re-exported from api.models
    "ClockResponse",
    "ConfirmResponse",
    "DayAvailabilityResponse",
    "DraftResponse",
    "EventListResponse",
    "EventResponse",
    "GridDayResponse",
    "MonthGridResponse",
    "OverlapResponse",
    "SlotResponse",
    "SlotSelectionResponse",
    "SubmitResponse",
    "WorkflowStateResponse",
    # Client-specific models
    "HealthResponse",
]


class HealthResponse(BaseModel):
    """Response model for the API health check.

    Attributes:
        status: Health status ("healthy").
    """

    status: str = Field(..., description="Health status")
