"""
Shared Domain Layer
Pure domain contracts with no framework dependencies
"""
from shared.domain.base_entity import BaseEntity
from shared.domain.base_value_object import BaseValueObject

__all__ = [
    "BaseEntity",
    "BaseValueObject",
]
