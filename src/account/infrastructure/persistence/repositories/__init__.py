from account.infrastructure.persistence.repositories.role_repository import RoleRepository
from account.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "RoleRepository"]
