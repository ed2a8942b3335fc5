"""Integration tests for the booking client library.

These tests run the client against the real FastAPI app through a custom
httpx transport wrapping Starlette's TestClient, so requests exercise the
routes, exception handlers and response models end to end.
"""

from datetime import date, datetime

import httpx
import pytest
from starlette.testclient import TestClient

from client import (
    APIError,
    BookingClient,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from main import app


@pytest.fixture
def booking_client(client_with_session):
    """A BookingClient wired to the app with a fresh pinned session."""
    _, session = client_with_session
    test_client = TestClient(app, raise_server_exceptions=False)

    class SyncTestTransport(httpx.BaseTransport):
        def handle_request(self, request: httpx.Request) -> httpx.Response:
            response = test_client.request(
                method=request.method,
                url=str(request.url.path),
                params=dict(request.url.params) if request.url.params else None,
                content=request.content,
                headers=dict(request.headers),
            )
            return httpx.Response(
                status_code=response.status_code,
                headers=response.headers,
                content=response.content,
            )

    with BookingClient(base_url="http://test", transport=SyncTestTransport()) as client:
        yield client, session


class TestEventsIntegration:
    def test_list_and_get(self, booking_client):
        client, _ = booking_client

        listing = client.events.list()

        assert listing.count == 4
        assert client.events.get(2).title == "Design review"

    def test_missing_event(self, booking_client):
        client, _ = booking_client

        with pytest.raises(NotFoundError) as exc_info:
            client.events.get(77)

        assert exc_info.value.event_id == 77


class TestAvailabilityIntegration:
    def test_day_and_month(self, booking_client):
        client, _ = booking_client

        day = client.availability.day(date(2025, 5, 21))
        grid = client.availability.month()

        assert day.status == "today"
        assert len(day.slots) == 48
        assert grid.month == date(2025, 5, 1)

    def test_slot_and_overlap(self, booking_client):
        client, _ = booking_client

        assert client.availability.slot(datetime(2025, 5, 21, 10, 0)).disabled is True
        assert client.availability.overlaps(
            datetime(2025, 5, 21, 10, 0),
            datetime(2025, 5, 21, 10, 30),
            datetime(2025, 5, 21, 10, 30),
            datetime(2025, 5, 21, 11, 0),
        ) is False


class TestWorkflowIntegration:
    def test_book_a_meeting(self, booking_client):
        client, session = booking_client

        selection = client.workflow.select_slot(
            datetime(2025, 5, 21, 14, 0), datetime(2025, 5, 21, 14, 30)
        )
        assert selection.accepted is True

        client.workflow.edit(title="Planning")
        result = client.workflow.submit()
        assert result.is_valid is True

        confirm = client.workflow.confirm()

        assert confirm.action == "create"
        assert confirm.event.event_id == 5
        assert session.store.get(5).title == "Planning"

    def test_rejected_submission(self, booking_client):
        client, session = booking_client
        client.workflow.open_create(datetime(2025, 5, 21, 14, 0))
        client.workflow.edit(title="Quick", end=datetime(2025, 5, 21, 14, 10))

        result = client.workflow.submit()

        assert result.is_valid is False
        assert result.reason == "Event must be at least 15 minutes long."
        assert session.store.event_count == 4

    def test_edit_then_delete(self, booking_client):
        client, session = booking_client

        client.workflow.open_edit(1)
        client.workflow.request_delete()
        client.workflow.cancel_confirm()
        state = client.workflow.close()

        assert state.phase == "idle"
        assert session.store.get(1) is not None

        client.workflow.open_edit(1)
        client.workflow.request_delete()
        client.workflow.confirm()

        assert session.store.get(1) is None

    def test_wrong_state(self, booking_client):
        client, _ = booking_client

        with pytest.raises(ConflictError) as exc_info:
            client.workflow.confirm()

        assert "Cannot confirm while workflow is idle" in exc_info.value.message

    def test_invalid_request(self, booking_client):
        client, _ = booking_client

        with pytest.raises(ValidationError):
            client.clock.advance(seconds=-5)


class TestClockIntegration:
    def test_pin_advance_release(self, booking_client):
        client, _ = booking_client

        client.clock.set(datetime(2025, 5, 22, 8, 0))
        advanced = client.clock.advance(seconds=1800)

        assert advanced.current_time == datetime(2025, 5, 22, 8, 30)

        released = client.clock.release()

        assert released.is_fixed is False

        with pytest.raises(APIError) as exc_info:
            client.clock.advance(seconds=60)

        assert exc_info.value.status_code == 400

    def test_health(self, booking_client):
        client, _ = booking_client

        assert client.health().status == "healthy"
