"""Event listing sub-client for the booking API.

This is an internal module. Import from `client` instead.
"""

from datetime import datetime

from client._base import BaseClient, _isoformat
from client.models import EventListResponse, EventResponse


class EventsClient(BaseClient):
    """Read-only client for committed events (/events/*).

    Events are created and changed through the workflow client; this client
    only reads them.

    Example:
        with BookingClient() as client:
            listing = client.events.list(search="demo")
            for event in listing.events:
                print(event.title, event.start)
    """

    _BASE_PATH = "/events"

    def list(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> EventListResponse:
        """List events sorted by start time.

        Args:
            start: Only events ending after this time.
            end: Only events starting before this time.
            search: Case-insensitive text searched in title and description.
            limit: Maximum number of events to return.
            offset: Number of events to skip.

        Returns:
            Matching events with counts.
        """
        params = {
            "start": _isoformat(start),
            "end": _isoformat(end),
            "search": search,
            "limit": limit,
            "offset": offset or None,
        }
        data = self._get(self._BASE_PATH, params=params)
        return EventListResponse(**data)

    def get(self, event_id: int) -> EventResponse:
        """Get one event.

        Args:
            event_id: Event identifier.

        Returns:
            The event.

        Raises:
            NotFoundError: If no event has this id.
        """
        data = self._get(f"{self._BASE_PATH}/{event_id}")
        return EventResponse(**data)
