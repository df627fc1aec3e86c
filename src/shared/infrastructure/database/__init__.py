"""
Shared Database Infrastructure
Session management, repositories, and UoW
"""
from shared.infrastructure.database.base_model import Base
from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from shared.infrastructure.database.unit_of_work import IUnitOfWork

__all__ = [
    "Base",
    "DatabaseSessionFactory",
    "SQLAlchemyRepository",
    "IUnitOfWork",
    "SQLAlchemyUnitOfWork",
]
