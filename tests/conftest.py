import random
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from pollverify.config import Settings
from pollverify.core.demo import DemoDataSource
from pollverify.core.seed import initialize_system
from pollverify.core.store import CheckInStore
from pollverify.main import create_app

# Election day 2024, a Tuesday
ELECTION_DAY = datetime(2024, 11, 5, 14, 30)


class FakeClock:
    """Callable clock that only moves when told to"""

    def __init__(self, start: datetime = ELECTION_DAY):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    # Minimum bcrypt cost keeps seeding fast
    return CheckInStore(clock=clock, demo=DemoDataSource(random.Random(1234)), password_rounds=4)


@pytest.fixture
def seeded_store(store):
    initialize_system(store)
    return store


@pytest.fixture
def settings():
    return Settings(_env_file=None, RANDOM_SEED=42, SEED_DEMO_DATA=True)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
