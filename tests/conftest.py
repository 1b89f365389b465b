"""Test configuration and fixtures"""

from datetime import datetime

import pytest

from frontdesk.database import get_engine, get_session_factory, init_db
from frontdesk.storage import MemoryStorage, SqlStorage
from frontdesk.store import ReservationStore


class FixedClock:
    """Clock that only moves when a test moves it"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    """Friday 10 January 2025, 17:00 local"""
    return FixedClock(datetime(2025, 1, 10, 17, 0))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, clock):
    return ReservationStore(storage, clock=clock)


@pytest.fixture
def sql_storage(tmp_path):
    """SQLite-file backed storage"""
    engine = get_engine(f"sqlite:///{tmp_path / 'reservations.db'}")
    init_db(engine)
    yield SqlStorage(get_session_factory(engine))
    engine.dispose()


@pytest.fixture
def make_input():
    """Build create input with overridable fields"""
    def _make(**overrides):
        data = {
            "customer_name": "Jane Smith",
            "customer_phone": "+15559876543",
            "customer_email": "jane@example.com",
            "party_size": 4,
            "date": "2025-01-10",
            "time": "19:00",
            "notes": "Birthday dinner",
        }
        data.update(overrides)
        return data
    return _make
