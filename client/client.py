"""Main booking calendar client class.

BookingClient gives namespaced access to the booking API through lazily
created sub-clients: ``events``, ``availability``, ``workflow`` and ``clock``.

Example:
    Booking a meeting::

        from client import BookingClient

        with BookingClient(base_url="http://localhost:8000") as client:
            selection = client.workflow.select_slot(
                datetime(2025, 5, 22, 10, 0), datetime(2025, 5, 22, 10, 30)
            )
            if not selection.accepted:
                print(selection.notice)
            else:
                client.workflow.edit(title="Planning")
                if client.workflow.submit().is_valid:
                    client.workflow.confirm()
"""

from typing import Any

from client._availability import AvailabilityClient
from client._clock import ClockClient
from client._events import EventsClient
from client._http import HTTPClient
from client._workflow import WorkflowClient
from client.models import HealthResponse


class BookingClient:
    """Synchronous client for the booking calendar REST API.

    Supports the context manager protocol for automatic resource cleanup.

    Attributes:
        base_url: The base URL of the booking server.
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the booking client.

        Args:
            base_url: The base URL of the booking server.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry connection errors, timeouts and
                HTTP 502/503/504 with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom httpx transport (e.g. for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

        self._events: EventsClient | None = None
        self._availability: AvailabilityClient | None = None
        self._workflow: WorkflowClient | None = None
        self._clock: ClockClient | None = None

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    @property
    def retry_enabled(self) -> bool:
        return self._http.retry_enabled

    @property
    def max_retries(self) -> int:
        return self._http.max_retries

    def __enter__(self) -> "BookingClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def health(self) -> HealthResponse:
        """Check that the server is up."""
        return HealthResponse(**self._http.get("/health"))

    # Sub-client properties (lazy initialization)

    @property
    def events(self) -> EventsClient:
        """Read committed events (/events/*)."""
        if self._events is None:
            self._events = EventsClient(self._http)
        return self._events

    @property
    def availability(self) -> AvailabilityClient:
        """Query slot, day and month availability (/availability/*)."""
        if self._availability is None:
            self._availability = AvailabilityClient(self._http)
        return self._availability

    @property
    def workflow(self) -> WorkflowClient:
        """Create, edit and delete events through the workflow (/workflow/*)."""
        if self._workflow is None:
            self._workflow = WorkflowClient(self._http)
        return self._workflow

    @property
    def clock(self) -> ClockClient:
        """Read and pin the server clock (/clock/*)."""
        if self._clock is None:
            self._clock = ClockClient(self._http)
        return self._clock
