"""
User Repository Implementation
"""
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import raiseload, selectinload
from sqlalchemy.orm.interfaces import ORMOption

from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from shared.infrastructure.observability.logger import get_logger
from shared.utils.clock import as_utc
from account.domain.entities.points_history import PointsHistoryEntry
from account.domain.entities.user import User
from account.domain.entities.weight_history import WeightHistoryEntry
from account.domain.exceptions import RoleNotFoundError, UserNotFoundError
from account.domain.value_objects.role import Role
from account.infrastructure.persistence.models.points_history_model import PointsHistoryModel
from account.infrastructure.persistence.models.role_model import RoleModel
from account.infrastructure.persistence.models.user_model import UserModel
from account.infrastructure.persistence.models.weight_history_model import WeightHistoryModel

logger = get_logger(__name__)


class UserRepository(SQLAlchemyRepository[User, UserModel]):
    """
    User repository implementation.
    
    Maps the User aggregate (roles, weight and points history) to its rows.
    update() rewrites the role association set to match the aggregate and
    inserts weight entries it has not seen yet; history rows are never
    modified or deleted.
    """
    
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=UserModel, entity_name="User")
    
    def _load_options(self) -> Sequence[ORMOption]:
        return (
            selectinload(UserModel.roles),
            selectinload(UserModel.weight_histories),
            selectinload(UserModel.points_histories),
        )
    
    def _to_entity(self, model: UserModel, *, with_history: bool = True) -> User:
        """Convert ORM model to domain aggregate"""
        if not with_history:
            weight_history, points_history = None, None
        else:
            weight_history = [
                WeightHistoryEntry(
                    id=w.id,
                    user_id=w.user_id,
                    weighing_date=as_utc(w.weighing_date),
                    weight=w.weight,
                )
                for w in model.weight_histories
            ]
            points_history = [
                PointsHistoryEntry(
                    id=p.id,
                    user_id=p.user_id,
                    awarded_on=as_utc(p.awarded_on),
                    points=p.points,
                )
                for p in model.points_histories
            ]
        return User(
            id=model.id,
            email=model.email,
            username=model.username,
            name=model.name,
            birth_date=model.birth_date,
            password_digest=bytes(model.password_digest),
            salt=bytes(model.salt),
            is_deleted=model.is_deleted,
            last_login_at=as_utc(model.last_login_at),
            last_modified_on=as_utc(model.last_modified_on),
            roles=[Role(id=r.id, name=r.name) for r in model.roles],
            weight_history=weight_history,
            points_history=points_history,
        )
    
    def _to_weight_model(self, entry: WeightHistoryEntry) -> WeightHistoryModel:
        return WeightHistoryModel(
            id=entry.id,
            user_id=entry.user_id,
            weighing_date=entry.weighing_date,
            weight=entry.weight,
        )
    
    async def _role_models(self, roles: Sequence[Role]) -> list[RoleModel]:
        """Resolve roles to attached ORM rows, preserving order."""
        wanted = [role.id for role in roles]
        if not wanted:
            return []
        result = await self.session.execute(select(RoleModel).where(RoleModel.id.in_(wanted)))
        by_id = {model.id: model for model in result.scalars().all()}
        missing = [role_id for role_id in wanted if role_id not in by_id]
        if missing:
            raise RoleNotFoundError(missing[0])
        return [by_id[role_id] for role_id in wanted]
    
    async def add(self, entity: User) -> User:
        """Insert user, role links and weight entries in one flush"""
        model = UserModel(
            id=entity.id,
            email=entity.email,
            username=entity.username,
            name=entity.name,
            birth_date=entity.birth_date,
            password_digest=entity.password_digest,
            salt=entity.salt,
            is_deleted=entity.is_deleted,
            last_login_at=entity.last_login_at,
            last_modified_on=entity.last_modified_on,
            roles=await self._role_models(entity.roles),
            weight_histories=[self._to_weight_model(e) for e in entity.weight_history],
            points_histories=[],
        )
        self.session.add(model)
        await self.session.flush()
        logger.debug("user_inserted", user_id=str(entity.id))
        return entity
    
    async def update(self, entity: User) -> User:
        """
        Persist the aggregate's current state.
        
        Raises:
            UserNotFoundError: If the row vanished
            RoleNotFoundError: If the aggregate references an unknown role
        """
        model = await self._get_model(entity.id)
        if model is None:
            raise UserNotFoundError(entity.id)
        
        model.email = entity.email
        model.username = entity.username
        model.name = entity.name
        model.birth_date = entity.birth_date
        model.password_digest = entity.password_digest
        model.is_deleted = entity.is_deleted
        model.last_login_at = entity.last_login_at
        model.last_modified_on = entity.last_modified_on
        
        model.roles = await self._role_models(entity.roles)
        
        known = {w.id for w in model.weight_histories}
        for entry in entity.weight_history:
            if entry.id not in known:
                model.weight_histories.append(self._to_weight_model(entry))
        
        await self.session.flush()
        logger.debug("user_updated", user_id=str(entity.id))
        return entity
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by normalized email, with roles only.
        
        Histories are not loaded; the returned aggregate must not be saved.
        """
        stmt = (
            select(UserModel)
            .where(UserModel.email == email)
            .options(
                selectinload(UserModel.roles),
                raiseload(UserModel.weight_histories),
                raiseload(UserModel.points_histories),
            )
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model, with_history=False) if model else None
    
    async def email_taken(self, email: str, exclude_user_id: Optional[UUID] = None) -> bool:
        return await self._value_taken(UserModel.email == email, exclude_user_id)
    
    async def username_taken(self, username: str, exclude_user_id: Optional[UUID] = None) -> bool:
        return await self._value_taken(UserModel.username == username, exclude_user_id)
    
    async def _value_taken(self, condition, exclude_user_id: Optional[UUID]) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(condition)
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0
