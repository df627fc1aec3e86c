"""
Role Repository Implementation
"""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from account.domain.value_objects.role import Role
from account.infrastructure.persistence.models.role_model import RoleModel


class RoleRepository(SQLAlchemyRepository[Role, RoleModel]):
    """Read access to role reference data."""
    
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=RoleModel, entity_name="Role")
    
    def _to_entity(self, model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name)
    
    def _to_model(self, entity: Role) -> RoleModel:
        return RoleModel(id=entity.id, name=entity.name)
