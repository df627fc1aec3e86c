"""
Account Application DTOs
Input models (pydantic) and read-side views (frozen dataclasses)
"""
from account.application.dto.models import (
    AddWeightModel,
    EditProfileModel,
    EditUserModel,
    LoginModel,
    PasswordChangeModel,
    RegisterModel,
)
from account.application.dto.views import AuthStatus, AuthVerdict, UserInfoModel

__all__ = [
    "LoginModel",
    "RegisterModel",
    "AddWeightModel",
    "EditProfileModel",
    "EditUserModel",
    "PasswordChangeModel",
    "AuthStatus",
    "AuthVerdict",
    "UserInfoModel",
]
