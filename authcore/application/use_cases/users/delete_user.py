"""Delete user use case."""

import logging
from typing import Optional
from uuid import UUID

from authcore.application.exceptions import NotFoundError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.services.refresh_sessions import RefreshSessions


logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for a user closing their own account."""

    def __init__(self, uow: UnitOfWorkPort, sessions: RefreshSessions):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            sessions: Refresh session bookkeeping
        """
        self.uow = uow
        self.sessions = sessions

    async def execute(self, user_id: UUID, refresh_token: Optional[str] = None) -> None:
        """
        Soft delete the account and end the caller's session.

        Sessions are keyed by token, so only the presented refresh token is
        revoked. Every other token of the user stops working because
        refresh and authentication no longer find the user.

        Args:
            user_id: ID of the account to delete
            refresh_token: Caller's refresh token, if known

        Raises:
            NotFoundError: If user doesn't exist
            StoreError: If the identity or session store fails
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError(
                    message="User not found",
                    resource_type="User",
                    resource_id=str(user_id),
                )

            user.soft_delete()
            await self.uow.users.update(user)
            await self.uow.commit()

        if refresh_token and await self.sessions.lookup(refresh_token) == str(user_id):
            await self.sessions.revoke(refresh_token)

        logger.info("User %s deleted their account", user_id)
