"""Clock control sub-client for the booking API.

This is an internal module. Import from `client` instead.
"""

from datetime import datetime

from client._base import BaseClient, _isoformat
from client.models import ClockResponse


class ClockClient(BaseClient):
    """Client for the server clock (/clock/*).

    Example:
        with BookingClient() as client:
            client.clock.set(datetime(2025, 5, 21, 9, 0))
            client.clock.advance(seconds=3600)
            print(client.clock.get().current_time)
    """

    _BASE_PATH = "/clock"

    def get(self) -> ClockResponse:
        """Get the server's current time and whether it is pinned."""
        data = self._get(self._BASE_PATH)
        return ClockResponse(**data)

    def set(self, current_time: datetime) -> ClockResponse:
        """Pin the server clock to ``current_time``."""
        data = self._post(
            f"{self._BASE_PATH}/set",
            json={"current_time": _isoformat(current_time)},
        )
        return ClockResponse(**data)

    def advance(self, seconds: float) -> ClockResponse:
        """Move the pinned clock forward.

        Args:
            seconds: Number of seconds to advance (must be positive).

        Raises:
            ValidationError: If seconds is not positive.
            APIError: If the clock is not pinned (HTTP 400).
        """
        data = self._post(f"{self._BASE_PATH}/advance", json={"seconds": seconds})
        return ClockResponse(**data)

    def release(self) -> ClockResponse:
        """Unpin the clock so it follows the system time."""
        data = self._post(f"{self._BASE_PATH}/release")
        return ClockResponse(**data)
