"""
Account Unit of Work
Coordinates account repositories within a transaction
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from account.infrastructure.persistence.repositories.role_repository import RoleRepository
from account.infrastructure.persistence.repositories.user_repository import UserRepository


class AccountUnitOfWork(SQLAlchemyUnitOfWork):
    """
    Unit of Work for the account module.
    
    Usage:
        async with uow:
            user = await uow.users.get_by_id(user_id)
            ...
            await uow.commit()
    """
    
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory)
        self._users: Optional[UserRepository] = None
        self._roles: Optional[RoleRepository] = None
    
    async def __aenter__(self) -> "AccountUnitOfWork":
        await super().__aenter__()
        return self
    
    def _on_enter(self) -> None:
        self._users = UserRepository(self.session)
        self._roles = RoleRepository(self.session)
    
    def _on_exit(self) -> None:
        self._users = None
        self._roles = None
    
    @property
    def users(self) -> UserRepository:
        if self._users is None:
            raise RuntimeError("UnitOfWork used outside of its 'async with' block")
        return self._users
    
    @property
    def roles(self) -> RoleRepository:
        if self._roles is None:
            raise RuntimeError("UnitOfWork used outside of its 'async with' block")
        return self._roles
