"""
User ORM Model
Maps to the users table
"""
from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Date, LargeBinary, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.infrastructure.database.base_model import Base, UUIDPrimaryKeyMixin
from account.infrastructure.persistence.models.role_model import user_roles

if TYPE_CHECKING:
    from account.infrastructure.persistence.models.points_history_model import PointsHistoryModel
    from account.infrastructure.persistence.models.role_model import RoleModel
    from account.infrastructure.persistence.models.weight_history_model import WeightHistoryModel


class UserModel(UUIDPrimaryKeyMixin, Base):
    """
    SQLAlchemy model for the users table.
    
    Collections load with selectin so the async session never lazy-loads.
    """
    
    __tablename__ = "users"
    
    # Core Fields
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    
    # Credentials
    password_digest: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    salt: Mapped[bytes] = mapped_column(LargeBinary(16), nullable=False)
    
    # Status
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    
    # Audit Fields
    last_login_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    last_modified_on: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
    
    # Relationships
    roles: Mapped[list[RoleModel]] = relationship(
        "RoleModel",
        secondary=user_roles,
        lazy="selectin",
        order_by="RoleModel.id",
    )
    weight_histories: Mapped[list[WeightHistoryModel]] = relationship(
        "WeightHistoryModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="WeightHistoryModel.weighing_date",
    )
    points_histories: Mapped[list[PointsHistoryModel]] = relationship(
        "PointsHistoryModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="PointsHistoryModel.awarded_on",
    )
    
    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
