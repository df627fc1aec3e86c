"""
Base Entity Contract for Domain Layer
Provides UUID-based identity and equality
"""
from __future__ import annotations

from abc import ABC
from uuid import UUID, uuid4


class BaseEntity(ABC):
    """
    Abstract base class for all domain entities.
    
    Entities are defined by their identity (id), not their attributes.
    Two entities are equal if they have the same id, regardless of other attributes.
    
    Attributes:
        id: Unique identifier (UUID)
    """
    
    def __init__(self, id: UUID | None = None) -> None:
        """
        Initialize entity with identity.
        
        Args:
            id: Entity UUID (generated if None)
        """
        self.id: UUID = id or uuid4()
    
    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same id and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id
    
    def __hash__(self) -> int:
        """Hash based on id for use in sets/dicts."""
        return hash(self.id)
    
    def __repr__(self) -> str:
        """String representation showing class name and id."""
        return f"{self.__class__.__name__}(id={self.id})"
