import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Insert project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from database.database import MemoryStorage  # noqa: E402
from database.store import KeyValueStore  # noqa: E402
from services.app_state import create_app_state  # noqa: E402


class FakeClock:
    """Returns a fixed time, moved forward by step on every call"""

    def __init__(self, start=None, step=timedelta(0)):
        self.now = start or datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return KeyValueStore(storage)


@pytest.fixture
def clock():
    return FakeClock(step=timedelta(minutes=1))


@pytest.fixture
def frozen_clock():
    return FakeClock()


@pytest.fixture
def state(store, clock):
    app_state = create_app_state(store=store, clock=clock)
    yield app_state
    app_state.close()


@pytest.fixture
def report_data():
    return {
        "name": "Ana",
        "contact": "ana@x.com",
        "location": "5th Ave",
        "waste_type": "illegal-dumping",
        "description": "trash pile blocking sidewalk",
    }
