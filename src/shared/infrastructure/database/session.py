"""
Database Session Factory
Creates async SQLAlchemy sessions with proper configuration
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shared.infrastructure.database.base_model import Base
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


def _is_in_memory(url: URL) -> bool:
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


class DatabaseSessionFactory:
    """
    Factory for creating async database sessions.
    
    Manages the async engine and session maker.
    Connection pooling applies to server databases. In-memory SQLite gets a
    single shared connection so the database survives across sessions; file
    SQLite keeps the driver default pool, one connection per session.
    """
    
    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
    ) -> None:
        """
        Initialize session factory with database connection.
        
        Args:
            database_url: Async SQLAlchemy URL (asyncpg or aiosqlite)
            echo: Whether to log SQL statements (debug mode)
            pool_size: Connection pool size (server databases only)
            max_overflow: Max overflow connections beyond pool_size
        """
        self.database_url = database_url
        self.echo = echo
        
        engine_kwargs: dict[str, Any] = {"echo": echo}
        url = make_url(database_url)
        if url.get_backend_name() == "sqlite":
            if _is_in_memory(url):
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,  # Verify connections before using
                pool_recycle=3600,  # Recycle connections after 1 hour
            )
        
        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)
        
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Entities stay readable after commit
            autoflush=False,  # Repositories flush explicitly
        )
        
        logger.info(
            "database_session_factory_initialized",
            dialect=self.engine.dialect.name,
            echo=echo,
        )
    
    async def create_schema(self) -> None:
        """Create all tables registered on Base.metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_schema_created", tables=sorted(Base.metadata.tables))
    
    async def dispose(self) -> None:
        """Close all connections and dispose of the engine."""
        await self.engine.dispose()
        logger.info("database_engine_disposed")
