"""
Schema and reference data bootstrap
"""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.observability.logger import get_logger
from account.domain.value_objects.role import Role, RoleType
from account.infrastructure.persistence import models  # noqa: F401  registers tables
from account.infrastructure.persistence.repositories.role_repository import RoleRepository

logger = get_logger(__name__)


async def seed_roles(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """Insert any missing RoleType rows. Returns how many were added."""
    async with session_factory() as session:
        roles = RoleRepository(session)
        existing = {role.id for role in await roles.get_by_ids([int(rt) for rt in RoleType])}
        missing = [rt for rt in RoleType if int(rt) not in existing]
        for role_type in missing:
            await roles.add(Role.from_type(role_type))
        await session.commit()
    if missing:
        logger.info("roles_seeded", roles=[rt.display_name for rt in missing])
    return len(missing)


async def init_database(database: DatabaseSessionFactory) -> None:
    """Create tables and seed roles."""
    await database.create_schema()
    await seed_roles(database.session_factory)
