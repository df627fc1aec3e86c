"""
User Account Service
Orchestrates login, registration, profile/role edits, weight and password changes
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional
from uuid import UUID, uuid4

from shared.infrastructure.observability.logger import get_logger
from shared.utils.clock import as_utc, utc_now

from account.application.dto.models import (
    AddWeightModel,
    EditProfileModel,
    EditUserModel,
    LoginModel,
    PasswordChangeModel,
    RegisterModel,
)
from account.application.dto.views import AuthVerdict, UserInfoModel
from account.application.mapper import ModelMapper
from account.application.validators import (
    validate_add_weight,
    validate_edit_profile,
    validate_edit_user_profile,
    validate_register,
)
from account.domain.entities.user import User
from account.domain.exceptions import RoleNotFoundError, UserNotFoundError
from account.domain.protocols.credential_hasher import CredentialHasher
from account.domain.protocols.unit_of_work import AccountUnitOfWorkProtocol
from account.domain.services.credentials import generate_salt
from account.domain.services.password_policy import is_valid_password
from account.domain.value_objects.email import Email
from account.domain.value_objects.role import RoleType

logger = get_logger(__name__)

UnitOfWorkFactory = Callable[[], AccountUnitOfWorkProtocol]


class UserAccountService:
    """
    Account use cases.

    Every call opens its own unit of work from ``uow_factory``; nothing is
    cached between calls. Mutating use cases validate first and then read,
    change and commit inside that one scope, so a validation error or any
    other exception leaves persisted state untouched. Login and the
    projections never commit.

    Bad credentials are an expected outcome: login returns an AuthVerdict and
    change_password returns a bool instead of raising.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        hasher: CredentialHasher,
        mapper: Optional[ModelMapper] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = hasher
        self._mapper = mapper or ModelMapper()
        self._clock = clock

    def _now(self) -> datetime:
        return self._clock()

    def _today(self) -> date:
        return self._now().date()

    async def login(self, model: LoginModel) -> AuthVerdict:
        """
        Authenticate by email and password.

        Disabled accounts are reported before the password is looked at, so
        the verdict never reveals whether a disabled user's password was right.
        Read-only on every path.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(Email.normalize(model.email))

        if user is None:
            logger.warning("login_rejected", reason="unknown_email")
            return AuthVerdict.unauthenticated()

        if user.is_deleted:
            logger.warning("login_rejected", reason="disabled", user_id=str(user.id))
            return AuthVerdict.disabled()

        if not user.credentials_match(self._hasher.hash(model.password, user.salt)):
            logger.warning("login_rejected", reason="bad_credentials", user_id=str(user.id))
            return AuthVerdict.unauthenticated()

        logger.info("login_succeeded", user_id=str(user.id))
        return self._mapper.to_auth_verdict(user)

    async def register_new_user(self, model: RegisterModel) -> UUID:
        """
        Create an account with the default role and its first weighing.

        Returns:
            The new user's id

        Raises:
            ValidationError: If any field rule or uniqueness check fails
            RoleNotFoundError: If the default role has not been seeded
        """
        async with self._uow_factory() as uow:
            (await validate_register(model, uow, today=self._today())).raise_if_invalid(model)

            default_role = await uow.roles.get_by_id(RoleType.USER)
            if default_role is None:
                raise RoleNotFoundError(RoleType.USER)

            salt = generate_salt()
            user = User.register(
                id=uuid4(),
                email=Email(model.email),
                username=model.username,
                name=model.name,
                birth_date=model.birth_date,
                salt=salt,
                password_digest=self._hasher.hash(model.password, salt),
                default_role=default_role,
                initial_weight=model.weight,
                registered_at=self._now(),
            )
            await uow.users.add(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(user.id))
        return user.id

    async def get_user_info(self, user_id: UUID) -> UserInfoModel:
        """
        Profile projection with roles, current weight and total points.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self._load_user(user_id)
        return self._mapper.to_user_info(user)

    async def get_edit_model(self, user_id: UUID) -> EditProfileModel:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self._load_user(user_id)
        return self._mapper.to_edit_profile_model(user)

    async def edit_profile(self, model: EditProfileModel, user_id: UUID) -> None:
        """
        Self-service edit of name, username and birth date.

        Raises:
            ValidationError: If a field rule fails
            UserNotFoundError: If the acting user does not exist
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            (await validate_edit_profile(model, user_id, uow, today=self._today())).raise_if_invalid(model)

            self._mapper.apply_edit_profile(model, user)
            await uow.users.update(user)
            await uow.commit()

        logger.info("profile_edited", user_id=str(user_id))

    async def get_user_edit_model(self, user_id: UUID) -> EditUserModel:
        """
        Administrative edit projection including assigned role ids.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self._load_user(user_id)
        return self._mapper.to_edit_user_model(user)

    async def edit_user_profile(self, model: EditUserModel) -> None:
        """
        Administrative edit: profile fields, disabled flag and the full role set.

        Roles are replaced, never merged: the user ends up with exactly the
        roles listed in the model.

        Raises:
            UserNotFoundError: If the target user does not exist
            ValidationError: If a field rule fails or a role id is unknown
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(model.user_id)
            if user is None:
                raise UserNotFoundError(model.user_id)

            (await validate_edit_user_profile(model, uow, today=self._today())).raise_if_invalid(model)

            self._mapper.apply_edit_user(model, user)
            roles_by_id = {role.id: role for role in await uow.roles.get_by_ids(model.roles)}
            user.replace_roles(roles_by_id[role_id] for role_id in model.roles)
            user.mark_modified(self._now())

            await uow.users.update(user)
            await uow.commit()

        logger.info(
            "user_profile_edited",
            user_id=str(model.user_id),
            roles=sorted(set(model.roles)),
            disabled=model.is_disabled,
        )

    async def change_password(self, model: PasswordChangeModel, user_id: UUID) -> bool:
        """
        Replace the password digest, keeping the registration salt.

        Returns:
            False if the old or new password fails the policy or the old
            password is wrong (indistinguishably); True once committed

        Raises:
            UserNotFoundError: If the acting user does not exist
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            if not is_valid_password(model.old_password):
                logger.warning("password_change_rejected", user_id=str(user_id))
                return False

            old_digest = self._hasher.hash(model.old_password, user.salt)
            if not is_valid_password(model.new_password) or not user.credentials_match(old_digest):
                logger.warning("password_change_rejected", user_id=str(user_id))
                return False

            user.change_password_digest(self._hasher.hash(model.new_password, user.salt))
            await uow.users.update(user)
            await uow.commit()

        logger.info("password_changed", user_id=str(user_id))
        return True

    async def add_weight(self, model: AddWeightModel, user_id: UUID) -> None:
        """
        Append one weighing (dated now unless the model carries a date).

        Raises:
            ValidationError: If the weight or date is out of range
            UserNotFoundError: If the user does not exist
        """
        now = self._now()
        validate_add_weight(model, now=now).raise_if_invalid(model)

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            user.record_weight(model.weight, as_utc(model.weighing_date) or now)
            await uow.users.update(user)
            await uow.commit()

        logger.info("weight_recorded", user_id=str(user_id))

    async def _load_user(self, user_id: UUID) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
