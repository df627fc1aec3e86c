"""
Account read-side views
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Optional
from uuid import UUID


class AuthStatus(StrEnum):
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    DISABLED = "disabled"


@dataclass(frozen=True)
class AuthVerdict:
    """
    Login outcome returned as a value.
    
    Identity fields are populated only for AUTHENTICATED verdicts.
    """
    status: AuthStatus
    user_id: Optional[UUID] = None
    email: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    roles: tuple[str, ...] = ()
    
    @classmethod
    def unauthenticated(cls) -> AuthVerdict:
        return cls(status=AuthStatus.UNAUTHENTICATED)
    
    @classmethod
    def disabled(cls) -> AuthVerdict:
        return cls(status=AuthStatus.DISABLED)
    
    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED
    
    @property
    def is_disabled(self) -> bool:
        return self.status is AuthStatus.DISABLED


@dataclass(frozen=True)
class UserInfoModel:
    """
    Profile page projection.
    
    current_weight is None when the user has no weighings.
    """
    id: UUID
    email: str
    name: str
    username: str
    birth_date: date
    roles: list[str]
    current_weight: Optional[float]
    total_points: int
    last_login_at: Optional[datetime] = None
    weight_history: list[tuple[datetime, float]] = field(default_factory=list)
