from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shared.exceptions import ValidationError


@dataclass
class ValidationResult:
    """Field name -> messages, in the order rules were evaluated."""
    errors: dict[str, list[str]] = field(default_factory=dict)
    
    @property
    def is_valid(self) -> bool:
        return not self.errors
    
    def add(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)
    
    def merge(self, other: ValidationResult) -> ValidationResult:
        for field_name, messages in other.errors.items():
            for message in messages:
                self.add(field_name, message)
        return self
    
    def raise_if_invalid(self, model: Any) -> None:
        """
        Raises:
            ValidationError: carrying ``model`` and a copy of the errors
        """
        if self.errors:
            raise ValidationError(model, {k: list(v) for k, v in self.errors.items()})
