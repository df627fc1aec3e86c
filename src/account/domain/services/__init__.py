from account.domain.services.credentials import SALT_LENGTH, generate_salt
from account.domain.services.password_policy import PASSWORD_PATTERN, is_valid_password

__all__ = ["PASSWORD_PATTERN", "is_valid_password", "SALT_LENGTH", "generate_salt"]
