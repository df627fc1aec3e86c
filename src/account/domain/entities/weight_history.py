"""
Weight History Entry - append-only weighing record
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from shared.domain.base_entity import BaseEntity


class WeightHistoryEntry(BaseEntity):
    """One weighing of a user. Never edited once recorded."""
    
    def __init__(
        self,
        user_id: UUID,
        weighing_date: datetime,
        weight: float,
        id: Optional[UUID] = None,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._weighing_date = weighing_date
        self._weight = float(weight)
    
    @property
    def user_id(self) -> UUID:
        return self._user_id
    
    @property
    def weighing_date(self) -> datetime:
        return self._weighing_date
    
    @property
    def weight(self) -> float:
        return self._weight
