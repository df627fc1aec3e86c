"""
Password strength policy.

At least one lowercase letter, one uppercase letter and one digit, eight or
more characters, and letters/digits only: symbols are rejected. The
letters-and-digits restriction is a product decision awaiting confirmation;
do not widen it here without one.
"""
from __future__ import annotations

import re
from typing import Final, Optional

PASSWORD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[A-Za-z\d]{8,}"
)


def is_valid_password(password: Optional[str]) -> bool:
    if not password:
        return False
    return PASSWORD_PATTERN.fullmatch(password) is not None
