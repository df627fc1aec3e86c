import pytest
from sqlalchemy import func, select

from shared.exceptions import ValidationError
from shared.infrastructure.database.session import DatabaseSessionFactory
from account.application.dto.models import LoginModel, RegisterModel
from account.application.factories import make_account_service
from account.domain.exceptions import RoleNotFoundError
from account.infrastructure.persistence.models import UserModel, WeightHistoryModel
from account.infrastructure.persistence.models.role_model import user_roles


async def _count(database, table):
    async with database.session_factory() as session:
        result = await session.execute(select(func.count()).select_from(table))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_register_creates_user_with_default_role_and_first_weighing(
    service, register_model, load_user, hasher, clock
):
    user_id = await service.register_new_user(register_model())

    user = await load_user(user_id)
    assert user.email == "a@b.com"
    assert [role.name for role in user.roles] == ["User"]
    assert [entry.weight for entry in user.weight_history] == [70.0]
    assert user.weight_history[0].weighing_date == user.last_login_at
    assert user.last_login_at <= clock.current
    assert len(user.salt) == 16
    assert user.password_digest == hasher.hash("Abcdef12", user.salt)

    verdict = await service.login(LoginModel(email="a@b.com", password="Abcdef12"))
    assert verdict.is_authenticated


@pytest.mark.asyncio
async def test_register_stores_normalized_email(service, register_model, load_user):
    user_id = await service.register_new_user(register_model(email="  Mixed.Case@Example.ORG "))

    user = await load_user(user_id)
    assert user.email == "mixed.case@example.org"


@pytest.mark.asyncio
async def test_each_user_gets_own_salt(service, register_model, load_user):
    first = await load_user(await service.register_new_user(register_model()))
    second = await load_user(
        await service.register_new_user(register_model(email="b@b.com", username="bob"))
    )

    assert first.salt != second.salt
    assert first.password_digest != second.password_digest


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected_case_insensitively(service, register_model, user_id):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_new_user(register_model(email="A@B.com", username="other"))

    assert "email" in exc_info.value.errors
    assert "username" not in exc_info.value.errors


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected(service, register_model, user_id):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_new_user(register_model(email="c@d.com"))

    assert list(exc_info.value.errors) == ["username"]


@pytest.mark.asyncio
async def test_rejected_registration_leaves_no_rows(service, register_model, database):
    model = register_model(password="weak", weight=0)

    with pytest.raises(ValidationError) as exc_info:
        await service.register_new_user(model)

    assert exc_info.value.model is model
    assert set(exc_info.value.errors) == {"password", "weight"}
    assert await _count(database, UserModel) == 0
    assert await _count(database, WeightHistoryModel) == 0
    assert await _count(database, user_roles) == 0


@pytest.mark.asyncio
async def test_every_failing_field_is_reported(service):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_new_user(RegisterModel())

    assert set(exc_info.value.errors) == {
        "email",
        "name",
        "username",
        "birth_date",
        "password",
        "weight",
    }


@pytest.mark.asyncio
async def test_birth_date_must_be_in_the_past(service, register_model, clock):
    with pytest.raises(ValidationError) as exc_info:
        await service.register_new_user(register_model(birth_date=clock.current.date()))

    assert "birth_date" in exc_info.value.errors


@pytest.mark.asyncio
async def test_missing_default_role_raises(hasher, register_model):
    database = DatabaseSessionFactory("sqlite+aiosqlite://")
    await database.create_schema()
    try:
        service = make_account_service(session_factory=database.session_factory, hasher=hasher)
        with pytest.raises(RoleNotFoundError):
            await service.register_new_user(register_model())
        assert await _count(database, UserModel) == 0
    finally:
        await database.dispose()
