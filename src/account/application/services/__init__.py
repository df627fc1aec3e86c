from account.application.services.user_account_service import UserAccountService

__all__ = ["UserAccountService"]
