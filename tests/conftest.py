"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from shortener_app.dependencies import get_clock, get_store
from shortener_app.storage.strategies import InMemoryURLStore


class FrozenClock:
    """Clock that only moves when told to"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture(scope="function")
def store():
    """A fresh, empty store for each test so tests stay isolated."""
    return InMemoryURLStore()


@pytest.fixture(scope="function")
def clock():
    return FrozenClock(datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture(scope="function")
def client(store, clock):
    """
    Create a test client with store and clock dependencies overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
