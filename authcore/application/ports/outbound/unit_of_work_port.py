"""Unit of Work port interface."""

from typing import Protocol

from authcore.application.ports.outbound.role_repository_port import RoleRepositoryPort
from authcore.application.ports.outbound.user_repository_port import UserRepositoryPort


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing identity store transactions.

    Usage:
        async with uow:
            user = await uow.users.get_by_id(user_id)
            user.record_login()
            await uow.users.update(user)
            await uow.commit()  # Commit is automatic on exit, but can be explicit

        # On exception, automatic rollback occurs
    """

    users: UserRepositoryPort
    roles: RoleRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.
        """
        ...

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StoreError: If the commit fails
        """
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
