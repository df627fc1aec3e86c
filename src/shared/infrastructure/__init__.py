"""
Shared Infrastructure Layer
Database and observability
"""
from shared.infrastructure.database import (
    Base,
    DatabaseSessionFactory,
    IUnitOfWork,
    SQLAlchemyRepository,
    SQLAlchemyUnitOfWork,
)
from shared.infrastructure.observability import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Database
    "Base",
    "DatabaseSessionFactory",
    "IUnitOfWork",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
    # Observability
    "configure_logging",
    "get_logger",
]
