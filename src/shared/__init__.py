"""
Shared Layer - Cross-Cutting Concerns
Domain contracts, errors, configuration, and infrastructure
"""

# Domain layer
from shared.domain import BaseEntity, BaseValueObject

# Errors
from shared.exceptions import DomainError, NotFoundError, ValidationError

# Infrastructure layer
from shared.infrastructure import (
    Base,
    DatabaseSessionFactory,
    IUnitOfWork,
    SQLAlchemyRepository,
    SQLAlchemyUnitOfWork,
    configure_logging,
    get_logger,
)

__all__ = [
    # Domain
    "BaseEntity",
    "BaseValueObject",
    # Errors
    "DomainError",
    "NotFoundError",
    "ValidationError",
    # Infrastructure
    "Base",
    "DatabaseSessionFactory",
    "IUnitOfWork",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
    "configure_logging",
    "get_logger",
]
