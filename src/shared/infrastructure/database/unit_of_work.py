"""
Unit of Work Interface (Protocol)
Manages transactions and coordinates repository operations
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IUnitOfWork(Protocol):
    """
    Unit of Work interface for transaction management.
    
    Coordinates multiple repository operations within a single transaction.
    All writes must occur within a UoW context to ensure atomicity; leaving
    the context without commit() discards everything.
    
    Usage:
        async with uow:
            entity = await uow.repository.get_by_id(id)
            entity.update_something()
            await uow.repository.update(entity)
            await uow.commit()  # Commits all changes atomically
    """
    
    async def __aenter__(self) -> IUnitOfWork:
        """Acquire a session and start the transactional scope."""
        ...
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Leave the scope.
        
        Rolls back if an exception occurred or commit() was never called,
        then releases the session unconditionally.
        """
        ...
    
    async def commit(self) -> None:
        """
        Commit the current transaction.
        
        Raises:
            Exception: If commit fails (after rolling back)
        """
        ...
    
    async def rollback(self) -> None:
        """Discard all changes made within this UoW context."""
        ...
