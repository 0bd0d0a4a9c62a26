"""PostgreSQL implementation of the role repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.exceptions import AlreadyExistsError, StoreError
from authcore.domain.entities.role import Role
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    RoleModel,
    UserRoleModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
    store_errors,
)


class PostgresRoleRepository(BaseRepository[RoleModel, Role]):
    """PostgreSQL implementation of RoleRepositoryPort."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, RoleModel, RoleMapper)

    async def add(self, role: Role) -> Role:
        """
        Insert a role.

        Raises:
            AlreadyExistsError: If a role with the same name exists
        """
        try:
            return await super().add(role)
        except IntegrityError as e:
            await self.session.rollback()
            if "uq_roles_name" in str(e.orig):
                raise AlreadyExistsError(
                    f"Role '{role.name}' already exists", resource_type="Role", field="name"
                ) from e
            raise StoreError(store="postgresql") from e

    async def get_by_name(self, name: str) -> Optional[Role]:
        stmt = select(RoleModel).where(RoleModel.name == name)
        async with store_errors("select"):
            result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.mapper.to_entity(model) if model else None

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[Role]:
        stmt = select(RoleModel).order_by(RoleModel.name).offset(skip).limit(limit)
        async with store_errors("select"):
            result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def assign_to_user(self, user_id: UUID, role_id: UUID) -> None:
        stmt = (
            insert(UserRoleModel)
            .values(user_id=user_id, role_id=role_id)
            .on_conflict_do_nothing(index_elements=["user_id", "role_id"])
        )
        async with store_errors("assign role"):
            await self.session.execute(stmt)

    async def remove_from_user(self, user_id: UUID, role_id: UUID) -> None:
        stmt = delete(UserRoleModel).where(
            UserRoleModel.user_id == user_id,
            UserRoleModel.role_id == role_id,
        )
        async with store_errors("remove role"):
            await self.session.execute(stmt)
