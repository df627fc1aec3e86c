"""
SQLAlchemy Implementation of Generic Repository
Concrete async repository using SQLAlchemy 2.x
"""
from __future__ import annotations

from typing import Any, Generic, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from shared.infrastructure.database.base_model import Base
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TEntity, TModel]):
    """
    Generic async SQLAlchemy repository implementation.
    
    Provides read/insert operations for domain objects by mapping to/from
    ORM models. Subclasses define the mapping and any eager-load options;
    updates are aggregate-specific and live in subclasses.
    
    Type Parameters:
        TEntity: Domain entity (or reference value) type
        TModel: SQLAlchemy ORM model type
    """
    
    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        entity_name: str,
    ) -> None:
        """
        Initialize repository with session and model mapping.
        
        Args:
            session: Active async database session
            model_class: SQLAlchemy ORM model class
            entity_name: Domain name used in log events
        """
        self.session = session
        self.model_class = model_class
        self.entity_name = entity_name
    
    def _to_entity(self, model: TModel) -> TEntity:
        """Convert ORM model to domain object. Subclass must implement."""
        raise NotImplementedError("Subclass must implement _to_entity")
    
    def _to_model(self, entity: TEntity) -> TModel:
        """Convert domain object to a new ORM model. Subclass must implement."""
        raise NotImplementedError("Subclass must implement _to_model")
    
    def _load_options(self) -> Sequence[ORMOption]:
        """Eager-load options applied to every query (async sessions cannot lazy load)."""
        return ()
    
    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity to the session and flush it.
        
        Args:
            entity: Domain object to persist
            
        Returns:
            The entity, unchanged
        """
        try:
            model = self._to_model(entity)
            self.session.add(model)
            await self.session.flush()
            logger.debug("repository_added", entity=self.entity_name, entity_id=str(model.id))
            return entity
        except Exception as e:
            logger.error("repository_add_failed", entity=self.entity_name, error=str(e))
            raise
    
    async def _get_model(self, entity_id: Any) -> TModel | None:
        stmt = (
            select(self.model_class)
            .where(self.model_class.id == entity_id)
            .options(*self._load_options())
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    async def get_by_id(self, entity_id: Any) -> TEntity | None:
        """
        Retrieve entity by its primary key.
        
        Returns:
            Entity if found, None otherwise
        """
        model = await self._get_model(entity_id)
        if model is None:
            logger.debug("repository_miss", entity=self.entity_name, entity_id=str(entity_id))
            return None
        return self._to_entity(model)
    
    async def get_by_ids(self, entity_ids: Sequence[Any]) -> list[TEntity]:
        """
        Retrieve multiple entities by primary key.
        
        Returns:
            Found entities, in no particular order; missing ids are absent
        """
        if not entity_ids:
            return []
        stmt = (
            select(self.model_class)
            .where(self.model_class.id.in_(list(entity_ids)))
            .options(*self._load_options())
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]
    
