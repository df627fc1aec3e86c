"""
Account input models.

Fields are optional at the type level on purpose: "required" is a business
rule reported by the validators together with every other field error,
not a parse failure.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LoginModel(_InputModel):
    email: str
    password: str


class RegisterModel(_InputModel):
    email: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    birth_date: Optional[date] = None
    password: Optional[str] = Field(default=None, repr=False)
    weight: Optional[float] = None


class AddWeightModel(_InputModel):
    weight: Optional[float] = None
    # defaults to "now" when omitted
    weighing_date: Optional[datetime] = None


class EditProfileModel(_InputModel):
    """Self-service profile fields; doubles as the edit-form projection."""
    name: Optional[str] = None
    username: Optional[str] = None
    birth_date: Optional[date] = None


class EditUserModel(_InputModel):
    """Administrative edit of another user, including the full role set."""
    user_id: UUID
    email: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    birth_date: Optional[date] = None
    is_disabled: bool = False
    roles: list[int] = Field(default_factory=list)


class PasswordChangeModel(_InputModel):
    old_password: Optional[str] = Field(default=None, repr=False)
    new_password: Optional[str] = Field(default=None, repr=False)
