"""
Argon2 Credential Hasher
Derives password digests from (password, salt) with Argon2id
"""
from __future__ import annotations

from argon2.low_level import Type, hash_secret_raw

from shared.config import Settings


class Argon2CredentialHasher:
    """
    Deterministic Argon2id key derivation.
    
    Unlike argon2.PasswordHasher this keeps the salt outside the digest: the
    salt is stored on the user row and reused for every later hash, so the
    same (password, salt) pair always yields the same bytes.
    """
    
    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,  # KiB
        parallelism: int = 4,
        hash_len: int = 32,
    ) -> None:
        self.time_cost = time_cost
        self.memory_cost = memory_cost
        self.parallelism = parallelism
        self.hash_len = hash_len
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "Argon2CredentialHasher":
        return cls(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
            hash_len=settings.argon2_hash_len,
        )
    
    def hash(self, plaintext: str, salt: bytes) -> bytes:
        return hash_secret_raw(
            secret=plaintext.encode("utf-8"),
            salt=salt,
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=self.hash_len,
            type=Type.ID,
        )
