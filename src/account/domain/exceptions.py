"""
Account Domain Exceptions
"""
from __future__ import annotations

from typing import Any

from shared.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a required user does not exist"""
    code = "user_not_found"
    
    def __init__(self, user_id: Any) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}", details={"user_id": str(user_id)})


class RoleNotFoundError(NotFoundError):
    """Raised when required role reference data is missing"""
    code = "role_not_found"
    
    def __init__(self, role_id: int) -> None:
        self.role_id = role_id
        super().__init__(f"Role not found: {role_id}", details={"role_id": role_id})
