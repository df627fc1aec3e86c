"""
SQLAlchemy Declarative Base
All ORM models inherit from this
"""
from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.
    
    Maps Python annotations to portable column types so the same models
    run on PostgreSQL (asyncpg) and SQLite (aiosqlite).
    """
    
    type_annotation_map = {
        UUID: Uuid(as_uuid=True),
        datetime: DateTime(timezone=True),
    }
    
    def __repr__(self) -> str:
        """String representation showing table name and primary key."""
        pk = getattr(self, "id", None)
        return f"<{self.__class__.__name__}(id={pk})>"


class UUIDPrimaryKeyMixin:
    """Adds a client-generated UUID primary key."""
    
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
        nullable=False,
    )
