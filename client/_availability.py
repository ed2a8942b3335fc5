"""Availability sub-client for the booking API.

This is an internal module. Import from `client` instead.
"""

from datetime import date, datetime

from client._base import BaseClient, _isoformat
from client.models import (
    DayAvailabilityResponse,
    MonthGridResponse,
    OverlapResponse,
    SlotResponse,
)


class AvailabilityClient(BaseClient):
    """Client for availability queries (/availability/*).

    These calls are advisory; they never change the calendar.

    Example:
        with BookingClient() as client:
            day = client.availability.day(date(2025, 5, 21))
            free = [slot.start for slot in day.slots if not slot.disabled]
    """

    _BASE_PATH = "/availability"

    def slot(self, start: datetime) -> SlotResponse:
        """Check whether the grid slot starting at ``start`` is disabled."""
        data = self._get(f"{self._BASE_PATH}/slot", params={"start": _isoformat(start)})
        return SlotResponse(**data)

    def day(self, day: date, slot_minutes: int = 30) -> DayAvailabilityResponse:
        """List a day's slots with their disabled flags.

        Args:
            day: The day.
            slot_minutes: Grid step; must evenly divide a day.

        Returns:
            The day's status and its slots in order.
        """
        data = self._get(
            f"{self._BASE_PATH}/day",
            params={"day": _isoformat(day), "slot_minutes": slot_minutes},
        )
        return DayAvailabilityResponse(**data)

    def month(
        self,
        month: date | None = None,
        selected: date | None = None,
    ) -> MonthGridResponse:
        """Get the Sunday-first grid for the month containing ``month``.

        Args:
            month: Any date in the month (default: the server's today).
            selected: Date to flag as selected.

        Returns:
            Grid cells plus previous/next month targets.
        """
        data = self._get(
            f"{self._BASE_PATH}/month",
            params={"month": _isoformat(month), "selected": _isoformat(selected)},
        )
        return MonthGridResponse(**data)

    def overlaps(
        self,
        a_start: datetime,
        a_end: datetime,
        b_start: datetime,
        b_end: datetime,
    ) -> bool:
        """Evaluate the server's half-open interval overlap predicate."""
        data = self._post(
            f"{self._BASE_PATH}/overlap",
            json={
                "a_start": _isoformat(a_start),
                "a_end": _isoformat(a_end),
                "b_start": _isoformat(b_start),
                "b_end": _isoformat(b_end),
            },
        )
        return OverlapResponse(**data).overlaps
