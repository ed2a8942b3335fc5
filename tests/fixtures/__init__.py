"""Test fixtures for the booking calendar.

- core: Event, store, clock, workflow and session factories
- api: TestClient wired to a fresh session
"""
