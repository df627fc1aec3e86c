"""
SQLAlchemy Implementation of Unit of Work
Manages database transactions with async SQLAlchemy sessions
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class SQLAlchemyUnitOfWork:
    """
    SQLAlchemy-based Unit of Work implementation.
    
    Each ``async with`` block acquires a fresh session from the factory and
    releases it on exit. Everything done inside the block is atomic: it is
    either committed explicitly or rolled back on exit.
    
    Attributes:
        session: Async SQLAlchemy session (only inside the context)
        _committed: Flag tracking if transaction was committed
    """
    
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize UoW with a session factory.
        
        Args:
            session_factory: Async sessionmaker bound to the engine
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._committed = False
    
    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork used outside of its 'async with' block")
        return self._session
    
    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        """
        Enter async context manager.
        
        Opens a new session; the transaction autobegins on first use.
        
        Returns:
            Self (the UoW instance)
        """
        if self._session is not None:
            raise RuntimeError("UnitOfWork is not re-entrant")
        self._session = self._session_factory()
        self._committed = False
        self._on_enter()
        logger.debug("unit_of_work_started")
        return self
    
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """
        Exit async context manager.
        
        Rolls back if an exception occurred or nothing was committed, and
        always closes the session.
        """
        try:
            if exc_type is not None:
                await self.rollback()
                logger.warning(
                    "unit_of_work_rolled_back",
                    reason=exc_type.__name__,
                    error=str(exc_val),
                )
            elif not self._committed:
                await self.rollback()
        finally:
            await self.session.close()
            self._session = None
            self._on_exit()
    
    async def commit(self) -> None:
        """
        Commit the current transaction.
        
        Raises:
            Exception: If commit fails (transaction is rolled back first)
        """
        try:
            await self.session.commit()
            self._committed = True
            logger.debug("unit_of_work_committed")
        except Exception as e:
            await self.rollback()
            logger.error("unit_of_work_commit_failed", error=str(e))
            raise
    
    async def rollback(self) -> None:
        """Discard all changes made within this UoW context."""
        try:
            await self.session.rollback()
            self._committed = False
            logger.debug("unit_of_work_rollback")
        except Exception as e:
            logger.error("unit_of_work_rollback_failed", error=str(e))
            raise
    
    def _on_enter(self) -> None:
        """Hook for subclasses that bind repositories to the new session."""
    
    def _on_exit(self) -> None:
        """Hook for subclasses that drop repositories bound to the old session."""
