"""
Account Domain Layer
Entities, value objects, collaborator contracts and password policy
"""
from account.domain.entities import PointsHistoryEntry, User, WeightHistoryEntry
from account.domain.exceptions import RoleNotFoundError, UserNotFoundError
from account.domain.value_objects import Email, Role, RoleType

__all__ = [
    "User",
    "WeightHistoryEntry",
    "PointsHistoryEntry",
    "Email",
    "Role",
    "RoleType",
    "UserNotFoundError",
    "RoleNotFoundError",
]
