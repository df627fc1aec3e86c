"""
Points History ORM Model
Maps to the user_points_histories table (written elsewhere, read here)
"""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.infrastructure.database.base_model import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from account.infrastructure.persistence.models.user_model import UserModel


class PointsHistoryModel(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "user_points_histories"
    
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    awarded_on: Mapped[datetime] = mapped_column(nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    
    user: Mapped[UserModel] = relationship("UserModel", back_populates="points_histories")
