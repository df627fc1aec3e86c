import pytest

from account.application.dto.models import LoginModel
from account.application.dto.views import AuthStatus


@pytest.mark.asyncio
async def test_login_with_registration_credentials_is_authenticated(service, user_id):
    verdict = await service.login(LoginModel(email="a@b.com", password="Abcdef12"))

    assert verdict.status is AuthStatus.AUTHENTICATED
    assert verdict.user_id == user_id
    assert verdict.username == "alice"
    assert verdict.roles == ("User",)


@pytest.mark.asyncio
async def test_login_email_lookup_ignores_case_and_whitespace(service, user_id):
    verdict = await service.login(LoginModel(email="  A@B.COM ", password="Abcdef12"))
    assert verdict.is_authenticated


@pytest.mark.asyncio
async def test_login_wrong_password(service, user_id):
    verdict = await service.login(LoginModel(email="a@b.com", password="Abcdef13"))

    assert verdict.status is AuthStatus.UNAUTHENTICATED
    assert verdict.user_id is None
    assert verdict.roles == ()


@pytest.mark.asyncio
async def test_login_unknown_email(service, user_id):
    verdict = await service.login(LoginModel(email="nobody@b.com", password="Abcdef12"))
    assert verdict.status is AuthStatus.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_login_is_read_only(service, user_id, load_user):
    before = await load_user(user_id)

    first = await service.login(LoginModel(email="a@b.com", password="Abcdef12"))
    second = await service.login(LoginModel(email="a@b.com", password="Abcdef12"))
    await service.login(LoginModel(email="a@b.com", password="nope"))

    after = await load_user(user_id)
    assert first == second
    assert after.last_login_at == before.last_login_at
    assert after.last_modified_on == before.last_modified_on
    assert after.password_digest == before.password_digest
    assert len(after.weight_history) == len(before.weight_history)


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["Abcdef12", "wrong-password"])
async def test_disabled_user_is_reported_disabled_regardless_of_password(service, user_id, password):
    edit = await service.get_user_edit_model(user_id)
    await service.edit_user_profile(edit.model_copy(update={"is_disabled": True}))

    verdict = await service.login(LoginModel(email="a@b.com", password=password))

    assert verdict.status is AuthStatus.DISABLED
    assert verdict.user_id is None
