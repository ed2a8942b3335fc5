"""Calendar event and event draft models."""

from datetime import datetime
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from models.clock import to_local_naive


class EventDraft(BaseModel):
    """An uncommitted event being edited (the workflow's candidate).

    A draft may hold any combination of values, including an empty title or an
    end before its start: rejecting those is the validation engine's job, which
    reports them with user-facing messages instead of raising.

    Args:
        event_id: Id of the event being edited, or None for a new event.
        title: Event title.
        description: Event description.
        start: Start time (local wall clock).
        end: End time (local wall clock).
    """

    event_id: Optional[int] = Field(
        default=None, description="Id of the edited event (None when creating)"
    )
    title: str = Field(default="", description="Event title")
    description: str = Field(default="", description="Event description")
    start: datetime = Field(description="Start time (local wall clock)")
    end: datetime = Field(description="End time (local wall clock)")

    @field_validator("start", "end")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store timestamps as naive local wall-clock time."""
        return to_local_naive(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Optional[str]) -> str:
        """Treat a missing description as empty text."""
        return v or ""

    @field_serializer("start", "end")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime to ISO format string.

        Args:
            dt: Datetime to serialize.

        Returns:
            ISO format string.
        """
        return dt.isoformat()

    @classmethod
    def from_event(cls, event: "CalendarEvent") -> "EventDraft":
        """Create a draft holding a copy of a stored event's fields.

        Args:
            event: The committed event to edit.

        Returns:
            Draft targeting the event's id.
        """
        return cls(
            event_id=event.event_id,
            title=event.title,
            description=event.description,
            start=event.start,
            end=event.end,
        )


class CalendarEvent(BaseModel):
    """A committed calendar event owned by the event store.

    Args:
        event_id: Unique integer id assigned by the store.
        title: Event title.
        description: Event description (may be empty).
        start: Start time (local wall clock).
        end: End time (local wall clock), strictly after start.
    """

    model_config = ConfigDict(frozen=True)

    event_id: int = Field(ge=1, description="Unique id assigned by the store")
    title: str = Field(description="Event title")
    description: str = Field(default="", description="Event description")
    start: datetime = Field(description="Start time (local wall clock)")
    end: datetime = Field(description="End time (local wall clock)")

    @field_validator("start", "end")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store timestamps as naive local wall-clock time."""
        return to_local_naive(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Optional[str]) -> str:
        """Treat a missing description as empty text."""
        return v or ""

    @model_validator(mode="after")
    def validate_time_range(self) -> "CalendarEvent":
        """Ensure the event ends after it starts.

        Raises:
            ValueError: If end is not after start.
        """
        if self.end <= self.start:
            raise ValueError(
                f"Event end time must be after start time: {self.start} to {self.end}"
            )
        return self

    @field_serializer("start", "end")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime to ISO format string.

        Args:
            dt: Datetime to serialize.

        Returns:
            ISO format string.
        """
        return dt.isoformat()

    def duration_minutes(self) -> int:
        """Return the event length in whole minutes."""
        return int((self.end - self.start).total_seconds() // 60)

    def get_summary(self) -> str:
        """Return human-readable summary of this event.

        Format: "#{event_id} [{start} - {end}] {title}"

        Returns:
            Brief description for logging and UI display.
        """
        start_str = self.start.strftime("%Y-%m-%d %H:%M")
        end_str = self.end.strftime("%H:%M")
        return f"#{self.event_id} [{start_str} - {end_str}] {self.title}"
