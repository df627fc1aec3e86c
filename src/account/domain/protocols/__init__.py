from account.domain.protocols.credential_hasher import CredentialHasher
from account.domain.protocols.unit_of_work import (
    AccountUnitOfWorkProtocol,
    RoleRepositoryProtocol,
    UserRepositoryProtocol,
)

__all__ = [
    "CredentialHasher",
    "AccountUnitOfWorkProtocol",
    "UserRepositoryProtocol",
    "RoleRepositoryProtocol",
]
