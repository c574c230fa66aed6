from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from local_agent import store
from local_agent.main import app


class FakeClock:
    """Returns scripted UTC times, one per call. Repeats the last one when exhausted."""

    def __init__(self, *offsets_seconds: float):
        base = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.times = [base + timedelta(seconds=s) for s in offsets_seconds]
        self.calls = 0

    def __call__(self) -> datetime:
        t = self.times[min(self.calls, len(self.times) - 1)]
        self.calls += 1
        return t


@pytest.fixture
def fake_clock():
    return FakeClock


@pytest.fixture(autouse=True)
def empty_stores():
    store.reset()
    yield
    store.reset()


@pytest.fixture
def client():
    # Not used as a context manager, so the startup seeding does not run
    # and every test starts from empty stores.
    return TestClient(app)
