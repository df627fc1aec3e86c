"""
Weight History ORM Model
Maps to the user_weight_histories table
"""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.infrastructure.database.base_model import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from account.infrastructure.persistence.models.user_model import UserModel


class WeightHistoryModel(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "user_weight_histories"
    
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    weighing_date: Mapped[datetime] = mapped_column(nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    
    user: Mapped[UserModel] = relationship("UserModel", back_populates="weight_histories")
