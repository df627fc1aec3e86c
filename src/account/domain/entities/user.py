"""
User Entity - Account identity, credentials, roles and weight history
"""
from __future__ import annotations

import hmac
from datetime import date, datetime
from typing import Iterable, Optional
from uuid import UUID

from shared.domain.base_entity import BaseEntity
from account.domain.entities.points_history import PointsHistoryEntry
from account.domain.entities.weight_history import WeightHistoryEntry
from account.domain.value_objects.email import Email
from account.domain.value_objects.role import Role


class User(BaseEntity):
    """
    User aggregate root.
    
    Owns its role set and weight history. Credentials are a salted digest;
    the salt is fixed when the account is registered and never rotated, so
    a password change only swaps the digest.
    
    Attributes:
        email: Normalized email address (unique)
        username: Public handle (unique)
        name: Display name
        birth_date: Date of birth
        password_digest: hash(password, salt)
        salt: Per-user random salt
        is_deleted: Soft-delete (disabled) flag
        last_login_at: Bookkeeping timestamp, set at registration
        last_modified_on: Stamped by administrative edits
        roles: Assigned roles (at least one once registered)
        weight_history: Weighings ordered by date
        points_history: Awarded points (read-only here)
    """
    
    def __init__(
        self,
        id: UUID,
        email: str,
        username: str,
        name: str,
        birth_date: date,
        password_digest: bytes,
        salt: bytes,
        is_deleted: bool = False,
        last_login_at: Optional[datetime] = None,
        last_modified_on: Optional[datetime] = None,
        roles: Optional[Iterable[Role]] = None,
        weight_history: Optional[Iterable[WeightHistoryEntry]] = None,
        points_history: Optional[Iterable[PointsHistoryEntry]] = None,
    ) -> None:
        super().__init__(id)
        self._email = email
        self._username = username
        self._name = name
        self._birth_date = birth_date
        self._password_digest = password_digest
        self._salt = salt
        self._is_deleted = is_deleted
        self._last_login_at = last_login_at
        self._last_modified_on = last_modified_on
        self._roles: list[Role] = list(roles or [])
        self._weight_history: list[WeightHistoryEntry] = list(weight_history or [])
        self._points_history: list[PointsHistoryEntry] = list(points_history or [])
    
    @staticmethod
    def register(
        id: UUID,
        email: Email,
        username: str,
        name: str,
        birth_date: date,
        salt: bytes,
        password_digest: bytes,
        default_role: Role,
        initial_weight: float,
        registered_at: datetime,
    ) -> User:
        """
        Factory for a brand-new account.
        
        The account starts with exactly one role, one weight entry dated at
        registration, and last login set to the registration time.
        """
        user = User(
            id=id,
            email=str(email),
            username=username,
            name=name,
            birth_date=birth_date,
            password_digest=password_digest,
            salt=salt,
            last_login_at=registered_at,
            roles=[default_role],
        )
        user.record_weight(initial_weight, registered_at)
        return user
    
    def credentials_match(self, candidate_digest: bytes) -> bool:
        """Exact comparison of the full stored digest with a candidate."""
        return hmac.compare_digest(self._password_digest, candidate_digest)
    
    def change_password_digest(self, new_digest: bytes) -> None:
        """Replace the digest; the salt stays as registered."""
        self._password_digest = new_digest
    
    def update_profile(self, name: str, username: str, birth_date: date) -> None:
        """Self-service editable fields"""
        self._name = name
        self._username = username
        self._birth_date = birth_date
    
    def change_email(self, email: Email) -> None:
        self._email = str(email)
    
    def set_disabled(self, disabled: bool) -> None:
        self._is_deleted = disabled
    
    def replace_roles(self, roles: Iterable[Role]) -> None:
        """Clear every role, then attach the given ones (duplicates collapse)."""
        self._roles.clear()
        for role in roles:
            if role not in self._roles:
                self._roles.append(role)
    
    def mark_modified(self, at: datetime) -> None:
        self._last_modified_on = at
    
    def record_weight(self, weight: float, weighed_on: datetime) -> WeightHistoryEntry:
        entry = WeightHistoryEntry(user_id=self.id, weighing_date=weighed_on, weight=weight)
        self._weight_history.append(entry)
        return entry
    
    def current_weight(self) -> Optional[float]:
        """Weight of the most recent weighing, or None without history."""
        if not self._weight_history:
            return None
        latest = max(self._weight_history, key=lambda e: e.weighing_date)
        return latest.weight
    
    def total_points(self) -> int:
        return sum(entry.points for entry in self._points_history)
    
    # Properties
    @property
    def email(self) -> str:
        return self._email
    
    @property
    def username(self) -> str:
        return self._username
    
    @property
    def name(self) -> str:
        return self._name
    
    @property
    def birth_date(self) -> date:
        return self._birth_date
    
    @property
    def password_digest(self) -> bytes:
        return self._password_digest
    
    @property
    def salt(self) -> bytes:
        return self._salt
    
    @property
    def is_deleted(self) -> bool:
        return self._is_deleted
    
    @property
    def last_login_at(self) -> Optional[datetime]:
        return self._last_login_at
    
    @property
    def last_modified_on(self) -> Optional[datetime]:
        return self._last_modified_on
    
    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(self._roles)
    
    @property
    def role_names(self) -> list[str]:
        return [role.name for role in self._roles]
    
    @property
    def weight_history(self) -> tuple[WeightHistoryEntry, ...]:
        return tuple(sorted(self._weight_history, key=lambda e: e.weighing_date))
    
    @property
    def points_history(self) -> tuple[PointsHistoryEntry, ...]:
        return tuple(self._points_history)
