"""Wall-clock reader used by validation and availability checks."""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def to_local_naive(value: datetime) -> datetime:
    """Convert a datetime to naive local wall-clock time.

    Timezone-aware values (e.g. ISO strings ending in "Z" received over the
    API) are shifted into the local zone and stripped of their tzinfo. Naive
    values are assumed to already be local and are returned unchanged.

    Args:
        value: Datetime to normalize.

    Returns:
        Naive datetime in local wall-clock time.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class CalendarClock(BaseModel):
    """Source of "now" for the booking core.

    By default the clock follows the system wall clock. It can be pinned to a
    fixed time, which makes past/future decisions deterministic for tests and
    demos. A pinned clock can be moved forward or backward explicitly.

    Args:
        fixed_time: Pinned local time, or None to follow the system clock.
    """

    fixed_time: Optional[datetime] = Field(
        default=None, description="Pinned local time (None = system clock)"
    )

    @field_validator("fixed_time")
    @classmethod
    def normalize_fixed_time(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store pinned times as naive local datetimes."""
        if v is None:
            return v
        return to_local_naive(v)

    @property
    def is_fixed(self) -> bool:
        """Whether the clock is pinned to a fixed time."""
        return self.fixed_time is not None

    def now(self) -> datetime:
        """Read the current local time.

        Evaluated on every call, so repeated validations see a fresh reading.

        Returns:
            The pinned time if set, otherwise the system's local time.
        """
        if self.fixed_time is not None:
            return self.fixed_time
        return datetime.now()

    def today(self) -> datetime:
        """Return the current local date normalized to midnight."""
        return self.now().replace(hour=0, minute=0, second=0, microsecond=0)

    def set_time(self, new_time: datetime) -> None:
        """Pin the clock to a specific time.

        Backwards jumps are allowed: the booking core only ever reads the
        time.

        Args:
            new_time: Time to pin the clock to.
        """
        self.fixed_time = to_local_naive(new_time)

    def advance(self, delta: timedelta) -> None:
        """Move a pinned clock forward by the given delta.

        Args:
            delta: Amount of time to advance.

        Raises:
            ValueError: If delta is negative or the clock is not pinned.
        """
        if delta < timedelta(0):
            raise ValueError("Cannot advance time backwards")

        if self.fixed_time is None:
            raise ValueError("Cannot advance the system clock; pin a time first")

        self.fixed_time += delta

    def release(self) -> None:
        """Unpin the clock so it follows the system wall clock again."""
        self.fixed_time = None

    def to_dict(self) -> dict:
        """Export clock state as dictionary for API responses.

        Returns:
            Dictionary with the current time and whether it is pinned.
        """
        return {
            "current_time": self.now().isoformat(),
            "is_fixed": self.is_fixed,
        }
