"""
Email Value Object
"""
from __future__ import annotations

import re
from typing import Final

from shared.domain.base_value_object import BaseValueObject


EMAIL_REGEX: Final[str] = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
MAX_EMAIL_LENGTH: Final[int] = 255


class Email(BaseValueObject):
    """
    Email address value object with validation.
    
    Normalizes to stripped lowercase, which makes address uniqueness and
    login lookup case-insensitive.
    """
    
    def __init__(self, value: str) -> None:
        normalized = self.normalize(value)
        
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email longer than {MAX_EMAIL_LENGTH} characters")
        if not re.match(EMAIL_REGEX, normalized):
            raise ValueError(f"Invalid email format: {value}")
        
        self._value = normalized
        self._finalize_init()
    
    @staticmethod
    def normalize(value: str) -> str:
        return value.strip().lower()
    
    @property
    def value(self) -> str:
        return self._value
    
    def __str__(self) -> str:
        return self._value
    
    def _get_equality_components(self) -> tuple:
        return (self._value,)
