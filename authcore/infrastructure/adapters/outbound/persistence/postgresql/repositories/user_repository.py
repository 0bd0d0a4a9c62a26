"""PostgreSQL implementation of the user repository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.application.exceptions import EmailAlreadyRegisteredError, StoreError
from authcore.domain.entities.role import Role
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_mapper import (
    UserMapper,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
    store_errors,
)


logger = logging.getLogger(__name__)

EMAIL_UNIQUE_INDEX = "ix_users_email_live"


class PostgresUserRepository(BaseRepository[UserModel, User]):
    """
    PostgreSQL implementation of UserRepositoryPort.

    Email matching is exact; the partial unique index on live rows is the
    authoritative guard against duplicate registration.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserModel, UserMapper)

    async def add(self, user: User) -> User:
        """
        Insert a user.

        Raises:
            EmailAlreadyRegisteredError: If a live user already has the email
            StoreError: On any other constraint violation or database failure
        """
        try:
            return await super().add(user)
        except IntegrityError as e:
            await self.session.rollback()
            if EMAIL_UNIQUE_INDEX in str(e.orig):
                logger.info("Concurrent registration lost the email uniqueness race")
                raise EmailAlreadyRegisteredError() from e
            logger.error("User insert violated a constraint: %s", e.orig)
            raise StoreError(store="postgresql") from e

    async def get_by_email(self, email: Email) -> Optional[User]:
        stmt = self._live(select(UserModel).where(UserModel.email == email.value))
        async with store_errors("select"):
            result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.mapper.to_entity(model) if model else None

    async def exists_by_email(self, email: Email) -> bool:
        stmt = select(
            exists().where(
                UserModel.email == email.value,
                UserModel.deleted_at.is_(None),
            )
        )
        async with store_errors("exists"):
            result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def get_user_roles(self, user_id: UUID) -> list[Role]:
        """
        Roles assigned to a user, ordered by name.

        Args:
            user_id: User's unique identifier

        Returns:
            Role entities (empty if none)
        """
        stmt = (
            select(RoleModel)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(UserRoleModel.user_id == user_id)
            .order_by(RoleModel.name)
        )
        async with store_errors("select roles"):
            result = await self.session.execute(stmt)
        return [RoleMapper.to_entity(model) for model in result.scalars().all()]
