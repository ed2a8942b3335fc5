"""Internal HTTP layer for the booking calendar client.

Every sub-client sends its requests through HTTPClient, which maps error
statuses onto the client exception hierarchy and optionally retries
transient failures with exponential backoff.

This is an internal module and should not be imported directly by users.
"""

import logging
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Status codes that are retried when retry is enabled
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Extract message, error type and details from an error response.

    The booking API answers errors with ``{"error": ..., "detail": ...}``;
    request validation failures raised by FastAPI itself carry a list of
    field errors under ``detail``.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    body = _decode_body(response)

    if isinstance(body, dict):
        detail = body.get("detail")
        extras = {
            key: value
            for key, value in body.items()
            if key not in ("detail", "error", "type")
        }
        if isinstance(detail, str):
            return detail, body.get("type") or body.get("error"), extras or None
        if isinstance(detail, list):
            messages = [
                f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
                for err in detail
            ]
            return "; ".join(messages), "validation_error", {"errors": detail}
        if "error" in body:
            return body["error"], body.get("type"), extras or None
        return str(body), None, None

    text = str(body).strip()
    if text:
        return text, None, None
    return f"HTTP {response.status_code} error", None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the client exception matching an error status.

    Args:
        response: The HTTP response to check.

    Raises:
        ValidationError: For HTTP 422 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code
    response_body = _decode_body(response)

    if status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    if status_code == 404:
        raise NotFoundError(
            message=message,
            event_id=(details or {}).get("event_id"),
            details=details,
            response_body=response_body,
        )
    if status_code == 409:
        raise ConflictError(message=message, details=details, response_body=response_body)
    if status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    raise APIError(
        message=message,
        status_code=status_code,
        error_type=error_type,
        details=details,
        response_body=response_body,
    )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return the delay before retry number ``attempt`` (0-indexed).

    The delay doubles with each attempt and is capped at
    DEFAULT_RETRY_BACKOFF_MAX seconds.
    """
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


class HTTPClient:
    """Synchronous HTTP client for the booking API.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g. a MockTransport in tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _retry_or_raise(self, error: Exception, cause: Exception, attempt: int, attempts: int) -> None:
        if not self.retry_enabled or attempt >= attempts - 1:
            raise error from cause
        delay = _calculate_backoff(attempt)
        logger.debug(f"{error}; retrying in {delay}s")
        time.sleep(delay)

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: The HTTP method.
            path: The URL path, appended to base_url.
            params: Query parameters; None values are dropped.
            json: JSON body to send.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            try:
                response = self._client.request(
                    method=method,
                    url=path,
                    params=params,
                    json=json,
                )
            except httpx.ConnectError as e:
                error = ConnectionError(
                    message=f"Failed to connect to {url}", url=url, cause=e
                )
                self._retry_or_raise(error, e, attempt, attempts)
                continue
            except httpx.TimeoutException as e:
                error = TimeoutError(
                    message=f"Request to {url} timed out", timeout=self.timeout, url=url
                )
                self._retry_or_raise(error, e, attempt, attempts)
                continue

            if (
                self.retry_enabled
                and response.status_code in RETRYABLE_STATUS_CODES
                and attempt < attempts - 1
            ):
                delay = _calculate_backoff(attempt)
                logger.debug(f"{method} {path} returned {response.status_code}; retrying in {delay}s")
                time.sleep(delay)
                continue

            _raise_for_status(response)

            if response.content:
                return response.json()
            return None

        raise RuntimeError("Unexpected exit from request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a POST request."""
        return self.request("POST", path, params=params, json=json)

    def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, params=params, json=json)

    def patch(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a PATCH request."""
        return self.request("PATCH", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path, params=params)
