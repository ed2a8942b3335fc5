"""Integration tests for availability routes.

- GET /availability/slot - Disabled state of one slot
- GET /availability/day - All slots of a day
- GET /availability/month - Month grid
- POST /availability/overlap - Overlap predicate
"""


class TestSlot:
    def test_free_slot(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/availability/slot", params={"start": "2025-05-21T14:00:00"})

        assert response.status_code == 200
        assert response.json() == {
            "start": "2025-05-21T14:00:00",
            "end": "2025-05-21T14:30:00",
            "disabled": False,
        }

    def test_booked_slot(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/availability/slot", params={"start": "2025-05-21T10:45:00"})

        assert response.json()["disabled"] is True

    def test_past_slot(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/availability/slot", params={"start": "2025-05-21T08:30:00"})

        assert response.json()["disabled"] is True

    def test_follows_session_clock(self, client_with_session):
        client, session = client_with_session
        session.clock.set_time(session.clock.now().replace(hour=15))

        response = client.get("/availability/slot", params={"start": "2025-05-21T14:00:00"})

        assert response.json()["disabled"] is True


class TestDay:
    def test_today(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/availability/day", params={"day": "2025-05-21"})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "today"
        assert len(data["slots"]) == 48
        disabled = {slot["start"]: slot["disabled"] for slot in data["slots"]}
        assert disabled["2025-05-21T09:00:00"] is False
        assert disabled["2025-05-21T10:00:00"] is True

    def test_past_and_future_status(self, client_with_session):
        client, _ = client_with_session

        assert client.get("/availability/day", params={"day": "2025-05-20"}).json()["status"] == "past"
        assert client.get("/availability/day", params={"day": "2025-05-22"}).json()["status"] == "future"

    def test_custom_step(self, client_with_session):
        client, _ = client_with_session

        response = client.get(
            "/availability/day", params={"day": "2025-05-22", "slot_minutes": 60}
        )

        assert len(response.json()["slots"]) == 24

    def test_uneven_step(self, client_with_session):
        client, _ = client_with_session

        response = client.get(
            "/availability/day", params={"day": "2025-05-22", "slot_minutes": 7}
        )

        assert response.status_code == 400
        assert "evenly divide" in response.json()["detail"]


class TestMonth:
    def test_defaults_to_current_month(self, client_with_session):
        client, _ = client_with_session

        response = client.get("/availability/month")

        assert response.status_code == 200
        data = response.json()
        assert data["month"] == "2025-05-01"
        assert data["previous_month"] == "2025-04-01"
        assert data["next_month"] == "2025-06-01"
        assert len(data["days"]) == 35
        assert data["days"][0]["day"] == "2025-04-27"

    def test_selected_and_status(self, client_with_session):
        client, _ = client_with_session

        data = client.get(
            "/availability/month", params={"month": "2025-05-10", "selected": "2025-05-23"}
        ).json()

        cells = {cell["day"]: cell for cell in data["days"]}
        assert cells["2025-05-21"]["status"] == "today"
        assert cells["2025-05-23"]["is_selected"] is True
        assert cells["2025-04-30"]["in_month"] is False


class TestOverlap:
    def test_touching(self, client_with_session):
        client, _ = client_with_session

        response = client.post(
            "/availability/overlap",
            json={
                "a_start": "2025-05-21T10:00:00",
                "a_end": "2025-05-21T10:30:00",
                "b_start": "2025-05-21T10:30:00",
                "b_end": "2025-05-21T11:00:00",
            },
        )

        assert response.json() == {"overlaps": False}

    def test_overlapping(self, client_with_session):
        client, _ = client_with_session

        response = client.post(
            "/availability/overlap",
            json={
                "a_start": "2025-05-21T10:00:00",
                "a_end": "2025-05-21T10:30:00",
                "b_start": "2025-05-21T10:15:00",
                "b_end": "2025-05-21T10:45:00",
            },
        )

        assert response.json() == {"overlaps": True}
