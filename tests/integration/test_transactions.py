from datetime import date, datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from shared.infrastructure.database.session import DatabaseSessionFactory
from account.application.factories import make_uow_factory
from account.application.services.user_account_service import UserAccountService
from account.domain.entities.user import User
from account.domain.value_objects.email import Email
from account.domain.value_objects.role import Role, RoleType
from account.infrastructure.persistence.bootstrap import init_database
from account.infrastructure.persistence.models import UserModel, WeightHistoryModel
from account.infrastructure.persistence.models.role_model import user_roles
from account.infrastructure.persistence.repositories.user_repository import UserRepository


def _new_user(email="t@x.com", username="tina"):
    return User.register(
        id=uuid4(),
        email=Email(email),
        username=username,
        name="Tina",
        birth_date=date(1992, 7, 8),
        salt=b"s" * 16,
        password_digest=b"d" * 32,
        default_role=Role.from_type(RoleType.USER),
        initial_weight=64.0,
        registered_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )


async def _row_counts(database):
    async with database.session_factory() as session:
        counts = []
        for table in (UserModel, WeightHistoryModel, user_roles):
            result = await session.execute(select(func.count()).select_from(table))
            counts.append(result.scalar_one())
        return tuple(counts)


@pytest_asyncio.fixture
async def file_database(tmp_path):
    db = DatabaseSessionFactory(f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}")
    await init_database(db)
    yield db
    await db.dispose()


def test_only_in_memory_sqlite_shares_one_connection(tmp_path):
    in_memory = DatabaseSessionFactory("sqlite+aiosqlite://")
    on_disk = DatabaseSessionFactory(f"sqlite+aiosqlite:///{tmp_path / 'a.db'}")

    assert isinstance(in_memory.engine.sync_engine.pool, StaticPool)
    assert not isinstance(on_disk.engine.sync_engine.pool, StaticPool)


@pytest.mark.asyncio
async def test_reader_rollback_does_not_discard_open_writer(file_database):
    uow_factory = make_uow_factory(file_database.session_factory)
    user = _new_user()

    async with uow_factory() as writer:
        await writer.users.add(user)

        async with uow_factory() as reader:
            assert await reader.users.get_by_email("t@x.com") is None

        await writer.commit()

    async with uow_factory() as uow:
        stored = await uow.users.get_by_id(user.id)
    assert stored is not None
    assert await _row_counts(file_database) == (1, 1, 1)


@pytest.mark.asyncio
async def test_exception_after_flush_rolls_back_everything(database, uow_factory):
    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.users.add(_new_user())
            raise RuntimeError("aborted mid-transaction")

    assert await _row_counts(database) == (0, 0, 0)


@pytest.mark.asyncio
async def test_commit_failure_rolls_back_and_propagates(database, uow_factory, monkeypatch):
    async def failing_commit(self):
        raise RuntimeError("commit refused")

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)

    with pytest.raises(RuntimeError, match="commit refused"):
        async with uow_factory() as uow:
            await uow.users.add(_new_user())
            await uow.commit()

    assert await _row_counts(database) == (0, 0, 0)


@pytest.mark.asyncio
async def test_duplicate_username_behind_validator_leaves_no_trace(
    service: UserAccountService, user_id, register_model, database, monkeypatch
):
    async def never_taken(self, username, exclude_user_id=None):
        return False

    monkeypatch.setattr(UserRepository, "username_taken", never_taken)

    with pytest.raises(IntegrityError):
        await service.register_new_user(register_model(email="second@b.com"))

    # only the first registration remains
    assert await _row_counts(database) == (1, 1, 1)


@pytest.mark.asyncio
@pytest.mark.filterwarnings("error::sqlalchemy.exc.SADeprecationWarning")
async def test_lookup_by_email_loads_roles_without_histories(user_id, uow_factory):
    async with uow_factory() as uow:
        user = await uow.users.get_by_email("a@b.com")

    assert user.id == user_id
    assert user.role_names == ["User"]
    assert user.weight_history == ()
    assert user.current_weight() is None
