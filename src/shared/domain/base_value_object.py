"""
Base Value Object Contract for Domain Layer
Immutable objects defined by their attributes, not identity
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseValueObject(ABC):
    """
    Abstract base class for all value objects.
    
    Value objects are immutable and defined by their attributes.
    Two value objects are equal if their equality components are equal.
    They have no identity (no UUID id field).
    
    Subclasses set their attributes in __init__ and then call
    _finalize_init() to freeze the instance.
    """
    
    @abstractmethod
    def _get_equality_components(self) -> tuple:
        """Return the attributes that define this value."""
    
    def __eq__(self, other: object) -> bool:
        """Value objects are equal if all equality components match."""
        if not isinstance(other, self.__class__):
            return False
        return self._get_equality_components() == other._get_equality_components()
    
    def __hash__(self) -> int:
        """Hash based on equality components for use in sets/dicts."""
        return hash(self._get_equality_components())
    
    def __repr__(self) -> str:
        """String representation showing class name and components."""
        attrs = ", ".join(repr(c) for c in self._get_equality_components())
        return f"{self.__class__.__name__}({attrs})"
    
    def __setattr__(self, name: str, value: Any) -> None:
        """
        Prevent modification after initialization.
        
        Raises:
            AttributeError: If attempting to modify after __init__
        """
        if hasattr(self, "_initialized"):
            raise AttributeError(
                f"Cannot modify immutable value object {self.__class__.__name__}"
            )
        super().__setattr__(name, value)
    
    def _finalize_init(self) -> None:
        """Call this at the end of __init__ in subclasses to freeze object."""
        super().__setattr__("_initialized", True)
