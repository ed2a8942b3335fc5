"""Exception hierarchy for the booking calendar API client.

Exception Hierarchy:
    BookingClientError (base)
    ├── ConnectionError - The server could not be reached
    ├── TimeoutError - The server did not answer in time
    └── APIError - The server answered with an error status
        ├── ValidationError (HTTP 422)
        ├── NotFoundError (HTTP 404)
        ├── ConflictError (HTTP 409)
        └── ServerError (HTTP 5xx)

Example:
    Reacting to a workflow call made in the wrong state::

        try:
            client.workflow.confirm()
        except ConflictError as e:
            print(f"Nothing to confirm: {e.message}")

    Catching anything the client can raise::

        try:
            client.events.list()
        except BookingClientError as e:
            print(f"Booking API unavailable: {e}")
"""

from typing import Any


class BookingClientError(Exception):
    """Base exception for all booking client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(BookingClientError):
    """The booking server could not be reached.

    Attributes:
        url: The URL that failed to connect.
        cause: The underlying transport exception.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(BookingClientError):
    """A request took longer than the configured timeout.

    Attributes:
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        extras = []
        if self.timeout is not None:
            extras.append(f"timeout: {self.timeout}s")
        if self.url:
            extras.append(f"url: {self.url}")
        if not extras:
            return self.message
        return f"{self.message} ({', '.join(extras)})"


class APIError(BookingClientError):
    """The server returned an HTTP error status.

    Attributes:
        status_code: HTTP status code from the server.
        error_type: Error type from the response body, if any.
        details: Structured error details from the response, if any.
        response_body: Raw decoded response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class ValidationError(APIError):
    """The request body or query failed validation (HTTP 422).

    Note that a candidate event failing the booking rules is not a
    ValidationError: submit() reports it in its result with status 200.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """The requested event does not exist (HTTP 404).

    Attributes:
        event_id: The id that was not found, when the server reports it.
    """

    def __init__(
        self,
        message: str,
        event_id: int | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.event_id = event_id
        super().__init__(
            message=message,
            status_code=404,
            error_type="not_found",
            details=details,
            response_body=response_body,
        )


class ConflictError(APIError):
    """The operation conflicts with the current state (HTTP 409).

    Raised for workflow transitions that the current phase does not offer
    (e.g. confirming with nothing pending).
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_type="conflict",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """The server failed internally (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
