"""Integration tests for clock routes.

- GET /clock - Current time
- POST /clock/set - Pin the clock
- POST /clock/advance - Move a pinned clock forward
- POST /clock/release - Follow the system clock again
"""


class TestGetClock:
    def test_pinned(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/clock")

        assert response.status_code == 200
        assert response.json() == {"current_time": "2025-05-21T09:00:00", "is_fixed": True}


class TestSetClock:
    def test_set(self, client_with_session):
        client, session = client_with_session

        response = client.post("/clock/set", json={"current_time": "2025-05-22T08:00:00"})

        assert response.json()["current_time"] == "2025-05-22T08:00:00"
        assert session.clock.now().day == 22

    def test_set_changes_validation(self, client_with_session):
        client, _ = client_with_session
        client.post("/clock/set", json={"current_time": "2025-05-21T15:00:00"})

        data = client.post(
            "/workflow/select-slot",
            json={"start": "2025-05-21T14:00:00", "end": "2025-05-21T14:30:00"},
        ).json()

        assert data["accepted"] is False


class TestAdvanceClock:
    def test_advance(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/clock/advance", json={"seconds": 3600})

        assert response.json()["current_time"] == "2025-05-21T10:00:00"

    def test_non_positive(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/clock/advance", json={"seconds": 0})

        assert response.status_code == 422

    def test_live_clock(self, client_with_session):
        client, _ = client_with_session
        client.post("/clock/release")

        response = client.post("/clock/advance", json={"seconds": 60})

        assert response.status_code == 400
        assert "pin a time" in response.json()["detail"]


class TestReleaseClock:
    def test_release(self, client_with_session):
        client, session = client_with_session

        response = client.post("/clock/release")

        assert response.json()["is_fixed"] is False
        assert session.clock.is_fixed is False
