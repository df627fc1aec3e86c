# src/account/application/factories.py
from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.config import Settings, get_settings
from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.observability.logger import configure_logging, get_logger
from account.application.services.user_account_service import UserAccountService
from account.domain.protocols.credential_hasher import CredentialHasher
from account.infrastructure.adapters.account_unit_of_work import AccountUnitOfWork
from account.infrastructure.adapters.argon2_credential_hasher import Argon2CredentialHasher

logger = get_logger(__name__)


# ---------- UoW factory -------------------------------------------------------

def make_uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], AccountUnitOfWork]:
    """
    Returns a zero-arg factory producing a fresh AccountUnitOfWork per call,
    so every service operation runs in its own session.
    """
    def _uow_factory() -> AccountUnitOfWork:
        return AccountUnitOfWork(session_factory)

    return _uow_factory


# ---------- UserAccountService ------------------------------------------------

def make_account_service(
    *,
    session_factory: async_sessionmaker[AsyncSession],
    hasher: CredentialHasher,
) -> UserAccountService:
    return UserAccountService(
        uow_factory=make_uow_factory(session_factory),
        hasher=hasher,
    )


def build_account_service(
    settings: Optional[Settings] = None,
    database: Optional[DatabaseSessionFactory] = None,
) -> tuple[UserAccountService, DatabaseSessionFactory]:
    """
    Wire the service from settings: logging, engine, hasher.

    Returns the database too; the caller owns dispose() and, for a fresh
    database, init_database().
    """
    settings = settings or get_settings()
    configure_logging(log_level=settings.log_level, json_logs=settings.log_json)

    if database is None:
        database = DatabaseSessionFactory(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    service = make_account_service(
        session_factory=database.session_factory,
        hasher=Argon2CredentialHasher.from_settings(settings),
    )
    logger.info("account_service_built", settings=settings.safe_dict())
    return service, database
