"""Per-user salt generation."""
from __future__ import annotations

import secrets
from typing import Final

SALT_LENGTH: Final[int] = 16


def generate_salt() -> bytes:
    return secrets.token_bytes(SALT_LENGTH)
