"""
Field rules reused by several validators.

Each check appends to the result and returns the cleaned value (or None
when the field is unusable) so callers can chain state-aware checks.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Final, Optional

from account.application.validators.validation_result import ValidationResult
from account.domain.services.password_policy import is_valid_password
from account.domain.value_objects.email import Email
from shared.utils.clock import as_utc

NAME_MAX_LENGTH: Final[int] = 100
USERNAME_MIN_LENGTH: Final[int] = 3
USERNAME_MAX_LENGTH: Final[int] = 50
USERNAME_REGEX: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_.-]+$")
MAX_WEIGHT: Final[float] = 500.0


def check_email(result: ValidationResult, value: Optional[str]) -> Optional[Email]:
    if value is None or not value.strip():
        result.add("email", "Email is required.")
        return None
    try:
        return Email(value)
    except ValueError:
        result.add("email", "Email address is not valid.")
        return None


def check_name(result: ValidationResult, value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        result.add("name", "Name is required.")
        return None
    if len(value) > NAME_MAX_LENGTH:
        result.add("name", f"Name must be at most {NAME_MAX_LENGTH} characters.")
        return None
    return value


def check_username(result: ValidationResult, value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        result.add("username", "Username is required.")
        return None
    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        result.add(
            "username",
            f"Username must be {USERNAME_MIN_LENGTH} to {USERNAME_MAX_LENGTH} characters.",
        )
        return None
    if not USERNAME_REGEX.match(value):
        result.add("username", "Username may contain letters, digits, '.', '_' and '-' only.")
        return None
    return value


def check_birth_date(result: ValidationResult, value: Optional[date], today: date) -> None:
    if value is None:
        result.add("birth_date", "Birth date is required.")
    elif value >= today:
        result.add("birth_date", "Birth date must be in the past.")


def check_password(result: ValidationResult, value: Optional[str], field_name: str = "password") -> None:
    if not is_valid_password(value):
        result.add(
            field_name,
            "Password must be at least 8 letters and digits with an uppercase "
            "letter, a lowercase letter and a digit.",
        )


def check_weight(result: ValidationResult, value: Optional[float]) -> None:
    if value is None:
        result.add("weight", "Weight is required.")
    elif not 0 < value <= MAX_WEIGHT:
        result.add("weight", f"Weight must be greater than 0 and at most {MAX_WEIGHT:g}.")


def check_not_in_future(
    result: ValidationResult, field_name: str, value: Optional[datetime], now: datetime
) -> None:
    if value is not None and as_utc(value) > now:
        result.add(field_name, "Date cannot be in the future.")
