"""
Account ORM models. Importing this package registers every table on Base.metadata.
"""
from account.infrastructure.persistence.models.points_history_model import PointsHistoryModel
from account.infrastructure.persistence.models.role_model import RoleModel, user_roles
from account.infrastructure.persistence.models.user_model import UserModel
from account.infrastructure.persistence.models.weight_history_model import WeightHistoryModel

__all__ = [
    "UserModel",
    "RoleModel",
    "user_roles",
    "WeightHistoryModel",
    "PointsHistoryModel",
]
