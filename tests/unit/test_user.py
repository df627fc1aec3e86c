from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from account.application.mapper import ModelMapper
from account.application.dto.models import EditUserModel
from account.application.dto.views import AuthStatus
from account.domain.entities.points_history import PointsHistoryEntry
from account.domain.entities.user import User
from account.domain.value_objects.email import Email
from account.domain.value_objects.role import Role, RoleType

REGISTERED_AT = datetime(2024, 1, 10, 8, 30, tzinfo=timezone.utc)


def make_user(**overrides):
    data = dict(
        id=uuid4(),
        email=Email("Eve@Example.com"),
        username="eve",
        name="Eve",
        birth_date=date(1985, 2, 3),
        salt=b"s" * 16,
        password_digest=b"d" * 32,
        default_role=Role.from_type(RoleType.USER),
        initial_weight=61.5,
        registered_at=REGISTERED_AT,
    )
    data.update(overrides)
    return User.register(**data)


def test_register_sets_initial_state():
    user = make_user()

    assert user.email == "eve@example.com"
    assert user.roles == (Role(1, "User"),)
    assert user.last_login_at == REGISTERED_AT
    assert user.last_modified_on is None
    assert user.current_weight() == 61.5
    assert user.is_deleted is False


def test_current_weight_is_latest_by_date_not_insertion():
    user = make_user()
    user.record_weight(58.0, REGISTERED_AT + timedelta(days=3))
    user.record_weight(65.0, REGISTERED_AT - timedelta(days=30))

    assert user.current_weight() == 58.0
    assert [e.weight for e in user.weight_history] == [65.0, 61.5, 58.0]


def test_current_weight_without_history_is_none():
    user = User(
        id=uuid4(),
        email="x@y.com",
        username="xyz",
        name="X",
        birth_date=date(2000, 1, 1),
        password_digest=b"d",
        salt=b"s",
    )
    assert user.current_weight() is None
    assert user.total_points() == 0


def test_total_points_sums_history():
    user_id = uuid4()
    user = User(
        id=user_id,
        email="x@y.com",
        username="xyz",
        name="X",
        birth_date=date(2000, 1, 1),
        password_digest=b"d",
        salt=b"s",
        points_history=[PointsHistoryEntry(user_id, REGISTERED_AT, p) for p in (3, 4, 5)],
    )
    assert user.total_points() == 12


def test_replace_roles_clears_and_dedupes():
    user = make_user()
    admin = Role.from_type(RoleType.ADMIN)

    user.replace_roles([admin, admin])

    assert user.roles == (admin,)


def test_credentials_match_requires_the_full_digest():
    user = make_user()
    assert user.credentials_match(b"d" * 32)
    assert not user.credentials_match(b"d" * 31)
    assert not user.credentials_match(b"d" * 31 + b"x")


def test_password_change_keeps_salt():
    user = make_user()
    user.change_password_digest(b"n" * 32)
    assert user.password_digest == b"n" * 32
    assert user.salt == b"s" * 16


def test_mapper_projections():
    mapper = ModelMapper()
    user = make_user()

    verdict = mapper.to_auth_verdict(user)
    assert verdict.status is AuthStatus.AUTHENTICATED
    assert verdict.roles == ("User",)

    info = mapper.to_user_info(user)
    assert info.current_weight == 61.5
    assert info.weight_history == [(REGISTERED_AT, 61.5)]

    edit = mapper.to_edit_user_model(user)
    assert edit.roles == [1]
    assert edit.is_disabled is False


def test_mapper_apply_edit_user_leaves_roles_and_credentials():
    mapper = ModelMapper()
    user = make_user()

    mapper.apply_edit_user(
        EditUserModel(
            user_id=user.id,
            email=" NEW@example.com",
            name="Eve B",
            username="eveb",
            birth_date=date(1985, 2, 4),
            is_disabled=True,
            roles=[2],
        ),
        user,
    )

    assert (user.email, user.name, user.username) == ("new@example.com", "Eve B", "eveb")
    assert user.is_deleted is True
    assert user.role_names == ["User"]
    assert user.password_digest == b"d" * 32


@pytest.mark.parametrize("value", ["", "plain", "a@b", "a b@c.com", "x" * 250 + "@b.com"])
def test_email_rejects_invalid_addresses(value):
    with pytest.raises(ValueError):
        Email(value)


def test_email_equality_is_case_insensitive():
    assert Email("A@B.com") == Email("a@b.COM ")
