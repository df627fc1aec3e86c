from account.domain.entities.points_history import PointsHistoryEntry
from account.domain.entities.user import User
from account.domain.entities.weight_history import WeightHistoryEntry

__all__ = ["User", "WeightHistoryEntry", "PointsHistoryEntry"]
