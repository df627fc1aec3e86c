"""
Credential Hasher Protocol (Interface)
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialHasher(Protocol):
    """
    Deterministic salted password hash.
    
    ``hash(p, s)`` must return the same bytes for the same inputs every time;
    the digest is used both to store and to verify credentials.
    """
    
    def hash(self, plaintext: str, salt: bytes) -> bytes:
        """Return the digest of ``plaintext`` under ``salt``."""
        ...
