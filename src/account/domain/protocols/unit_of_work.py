"""
Account Unit of Work and Repository Protocols (Interfaces)
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence
from uuid import UUID

from shared.infrastructure.database.unit_of_work import IUnitOfWork
from account.domain.entities.user import User
from account.domain.value_objects.role import Role


class UserRepositoryProtocol(Protocol):
    """User repository interface"""
    
    async def add(self, user: User) -> User:
        """Insert a new user with its roles and weight history"""
        ...
    
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user (roles and histories loaded) by ID"""
        ...
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user (roles loaded) by normalized email"""
        ...
    
    async def email_taken(self, email: str, exclude_user_id: Optional[UUID] = None) -> bool:
        ...
    
    async def username_taken(self, username: str, exclude_user_id: Optional[UUID] = None) -> bool:
        ...
    
    async def update(self, user: User) -> User:
        """Persist scalar fields, the full role set and new weight entries"""
        ...


class RoleRepositoryProtocol(Protocol):
    """Role reference-data interface"""
    
    async def get_by_id(self, role_id: int) -> Optional[Role]:
        ...
    
    async def get_by_ids(self, role_ids: Sequence[int]) -> list[Role]:
        ...


class AccountUnitOfWorkProtocol(IUnitOfWork, Protocol):
    """
    Transactional scope over users and roles.
    
    Usage:
        async with uow:
            user = await uow.users.get_by_id(user_id)
            ...
            await uow.commit()
    """
    
    @property
    def users(self) -> UserRepositoryProtocol:
        ...
    
    @property
    def roles(self) -> RoleRepositoryProtocol:
        ...
    
    async def __aenter__(self) -> AccountUnitOfWorkProtocol:
        ...
