from datetime import datetime, timedelta, timezone

import pytest
from aiohttp.test_utils import TestClient
from faker import Faker

from bikeshare.app import build_app
from bikeshare.models import Bike, User
from bikeshare.service import BikeShare
from bikeshare.store import build_repositories
from bikeshare.store.database import init_database, close_database

DATABASE_URI = "sqlite://:memory:"

fake = Faker()


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def tick(self, delta: timedelta):
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def database():
    await init_database(DATABASE_URI)
    yield
    await close_database()


@pytest.fixture(params=["memory", "database"])
async def repositories(request):
    """Runs the test once against each set of repositories."""
    if request.param == "memory":
        yield build_repositories()
    else:
        await init_database(DATABASE_URI)
        yield build_repositories(DATABASE_URI)
        await close_database()


@pytest.fixture
def bike_share(repositories, clock) -> BikeShare:
    return BikeShare(*repositories, clock=clock)


@pytest.fixture
def memory_bike_share(clock) -> BikeShare:
    return BikeShare(*build_repositories(), clock=clock)


@pytest.fixture
def user_factory():
    def create_user(email=None):
        return User(fake.name(), email or fake.unique.email(), fake.password())

    return create_user


@pytest.fixture
def bike_factory():
    def create_bike(rate=100.0):
        return Bike(
            fake.word(), "mountain bike", fake.random_int(1, 9999), fake.random_int(1, 9999), rate,
            fake.sentence(), fake.random_int(0, 5), [fake.image_url()]
        )

    return create_bike


@pytest.fixture
async def random_user(bike_share, user_factory) -> User:
    """Registers a random user."""
    user = user_factory()
    await bike_share.register_user(user)
    return user


@pytest.fixture
async def random_bike(bike_share, bike_factory) -> Bike:
    """Registers a random bike."""
    bike = bike_factory()
    await bike_share.register_bike(bike)
    return bike


@pytest.fixture
async def client(aiohttp_client) -> TestClient:
    return await aiohttp_client(build_app())
