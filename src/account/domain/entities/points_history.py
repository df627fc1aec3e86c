"""
Points History Entry - read-only here, aggregated for display
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from shared.domain.base_entity import BaseEntity


class PointsHistoryEntry(BaseEntity):
    def __init__(
        self,
        user_id: UUID,
        awarded_on: datetime,
        points: int,
        id: Optional[UUID] = None,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._awarded_on = awarded_on
        self._points = points
    
    @property
    def user_id(self) -> UUID:
        return self._user_id
    
    @property
    def awarded_on(self) -> datetime:
        return self._awarded_on
    
    @property
    def points(self) -> int:
        return self._points
