"""
PostgreSQL implementation of the Unit of Work pattern.

Coordinates the user and role repositories over one SQLAlchemy session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    store_errors,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """
    PostgreSQL implementation of UnitOfWorkPort.

    All repositories share the same SQLAlchemy session, so everything done
    inside one ``async with`` block is committed or rolled back together.
    The same instance may be entered several times in sequence.

    Usage:
        async with uow:
            user = await uow.users.get_by_id(user_id)
            user.record_login()
            await uow.users.update(user)
            await uow.commit()

        # On exception, automatic rollback occurs

    Attributes:
        users: User repository
        roles: Role repository
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Unit of Work with a database session.

        Args:
            session: SQLAlchemy AsyncSession for database operations
        """
        self._session = session
        self.users = PostgresUserRepository(session)
        self.roles = PostgresRoleRepository(session)

    async def __aenter__(self) -> "PostgresUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred during the context, roll back.
        Otherwise, commit.
        """
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StoreError: If the commit fails
        """
        async with store_errors("commit"):
            await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def close(self) -> None:
        await self._session.close()
