from datetime import date, datetime, timedelta, timezone

import pytest
import pytest_asyncio

from shared.infrastructure.database.session import DatabaseSessionFactory
from account.application.dto.models import RegisterModel
from account.application.factories import make_uow_factory
from account.application.services.user_account_service import UserAccountService
from account.infrastructure.adapters.argon2_credential_hasher import Argon2CredentialHasher
from account.infrastructure.persistence.bootstrap import init_database

PASSWORD = "Abcdef12"


@pytest.fixture
def hasher():
    # minimum Argon2 cost keeps the suite fast
    return Argon2CredentialHasher(time_cost=1, memory_cost=8, parallelism=1, hash_len=32)


@pytest_asyncio.fixture
async def database():
    db = DatabaseSessionFactory("sqlite+aiosqlite://")
    await init_database(db)
    yield db
    await db.dispose()


@pytest.fixture
def uow_factory(database):
    return make_uow_factory(database.session_factory)


class FakeClock:
    """Starts at a fixed instant and moves one minute forward per reading."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(uow_factory, hasher, clock):
    return UserAccountService(uow_factory=uow_factory, hasher=hasher, clock=clock)


def _register_model(**overrides) -> RegisterModel:
    data = dict(
        email="a@b.com",
        name="Alice",
        username="alice",
        birth_date=date(1990, 5, 17),
        password=PASSWORD,
        weight=70.0,
    )
    data.update(overrides)
    return RegisterModel(**data)


@pytest_asyncio.fixture
async def user_id(service):
    return await service.register_new_user(_register_model())


@pytest.fixture
def register_model():
    """Builds a valid RegisterModel; keyword overrides replace fields."""
    return _register_model


@pytest.fixture
def load_user(uow_factory):
    async def _load(user_id):
        async with uow_factory() as uow:
            return await uow.users.get_by_id(user_id)
    return _load
