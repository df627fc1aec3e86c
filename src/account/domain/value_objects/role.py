"""Role reference value with the well-known role ids."""
from __future__ import annotations

from enum import IntEnum

from shared.domain.base_value_object import BaseValueObject


class RoleType(IntEnum):
    """Seeded role ids."""
    USER = 1
    ADMIN = 2

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Role(BaseValueObject):
    """
    Immutable role reference (small integer id + name).
    
    Users hold Roles by value; two Roles with the same id and name are equal.
    """
    
    def __init__(self, id: int, name: str) -> None:
        self._id = id
        self._name = name
        self._finalize_init()
    
    @classmethod
    def from_type(cls, role_type: RoleType) -> Role:
        return cls(int(role_type), role_type.display_name)
    
    @property
    def id(self) -> int:
        return self._id
    
    @property
    def name(self) -> str:
        return self._name
    
    def _get_equality_components(self) -> tuple:
        return (self._id, self._name)
