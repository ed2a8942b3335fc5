"""Base class for all sub-clients.

This is an internal module and should not be imported directly by users.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import HTTPClient


def _isoformat(value: date | datetime | None) -> str | None:
    """Render a date or datetime for a query string or JSON body."""
    if value is None:
        return None
    return value.isoformat()


class BaseClient:
    """Base class for the booking sub-clients.

    Each sub-client covers one group of endpoints and shares the HTTP
    client owned by BookingClient.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._http.get(path, params=params)

    def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self._http.post(path, json=json, params=params)

    def _patch(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self._http.patch(path, json=json, params=params)
