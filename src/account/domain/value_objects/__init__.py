"""Value objects for the account domain."""

from .email import Email
from .role import Role, RoleType

__all__ = [
    "Email",
    "Role",
    "RoleType",
]
