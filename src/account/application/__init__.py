"""
Account Application Layer
Use-case orchestration, validators, DTOs and model mapping
"""
from account.application.mapper import ModelMapper
from account.application.services.user_account_service import UserAccountService

__all__ = ["ModelMapper", "UserAccountService"]
