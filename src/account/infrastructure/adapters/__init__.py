from account.infrastructure.adapters.account_unit_of_work import AccountUnitOfWork
from account.infrastructure.adapters.argon2_credential_hasher import Argon2CredentialHasher

__all__ = ["AccountUnitOfWork", "Argon2CredentialHasher"]
