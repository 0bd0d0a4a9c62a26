"""
Base repository class for common database operations.

Provides generic CRUD operations shared by the repositories, soft delete
filtering, entity ↔ model conversion via mappers, and translation of
SQLAlchemy failures into StoreError / StoreTimeoutError.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.exceptions import NotFoundError, StoreError, StoreTimeoutError
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base


logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=Base)
TEntity = TypeVar("TEntity")


@asynccontextmanager
async def store_errors(operation: str) -> AsyncIterator[None]:
    """
    Translate database failures raised inside the block.

    IntegrityError is re-raised untouched so callers can map known
    constraint violations.

    Args:
        operation: Name used in the log line

    Raises:
        StoreTimeoutError: On command or pool timeout
        StoreError: On any other SQLAlchemy failure
    """
    try:
        yield
    except IntegrityError:
        raise
    except (TimeoutError, PoolTimeoutError) as e:
        logger.error("Database %s timed out", operation)
        raise StoreTimeoutError(store="postgresql") from e
    except SQLAlchemyError as e:
        logger.error("Database %s failed: %s", operation, e)
        raise StoreError(store="postgresql") from e


class BaseRepository(Generic[TModel, TEntity]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        TModel: SQLAlchemy model type (e.g., UserModel)
        TEntity: Domain entity type (e.g., User)

    Usage:
        class PostgresUserRepository(BaseRepository[UserModel, User]):
            def __init__(self, session: AsyncSession):
                super().__init__(session, UserModel, UserMapper)
    """

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        mapper_class,
    ):
        """
        Initialize base repository.

        Args:
            session: SQLAlchemy async session
            model_class: SQLAlchemy model class
            mapper_class: Mapper class with to_entity() and to_model() methods
        """
        self.session = session
        self.model_class = model_class
        self.mapper = mapper_class

    def _live(self, stmt):
        if hasattr(self.model_class, "deleted_at"):
            stmt = stmt.where(self.model_class.deleted_at.is_(None))
        return stmt

    async def _get_model(self, entity_id: UUID, include_deleted: bool = False) -> Optional[TModel]:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        if not include_deleted:
            stmt = self._live(stmt)
        async with store_errors("select"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity to the database.

        Args:
            entity: Domain entity to persist

        Returns:
            Created entity with database-generated fields

        Raises:
            IntegrityError: On constraint violation (mapped by subclasses)
        """
        model = self.mapper.to_model(entity)
        self.session.add(model)
        async with store_errors("insert"):
            await self.session.flush()
            await self.session.refresh(model)
        return self.mapper.to_entity(model)

    async def get_by_id(self, entity_id: UUID, include_deleted: bool = False) -> Optional[TEntity]:
        """
        Retrieve entity by ID.

        Args:
            entity_id: Entity's unique identifier
            include_deleted: Whether to include soft-deleted records

        Returns:
            Domain entity if found, None otherwise
        """
        model = await self._get_model(entity_id, include_deleted)
        if model is None:
            return None
        return self.mapper.to_entity(model)

    async def update(self, entity: TEntity) -> TEntity:
        """
        Update existing entity.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        entity_id = entity.id  # type: ignore[attr-defined]
        existing_model = await self._get_model(entity_id)
        if existing_model is None:
            raise NotFoundError(
                f"{self.model_class.__name__} with id {entity_id} not found",
                resource_id=str(entity_id),
            )

        updated_model = self.mapper.to_model(entity, existing_model=existing_model)
        async with store_errors("update"):
            await self.session.flush()
            await self.session.refresh(updated_model)
        return self.mapper.to_entity(updated_model)

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[TEntity]:
        """Live entities, oldest first."""
        stmt = (
            self._live(select(self.model_class))
            .order_by(self.model_class.created_at, self.model_class.id)
            .offset(skip)
            .limit(limit)
        )
        async with store_errors("select"):
            result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def count(self) -> int:
        stmt = self._live(select(func.count()).select_from(self.model_class))
        async with store_errors("count"):
            result = await self.session.execute(stmt)
        return int(result.scalar_one())
