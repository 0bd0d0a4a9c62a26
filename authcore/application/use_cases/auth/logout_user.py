"""Logout user use case."""

import logging

from authcore.application.dto.auth_dto import LogoutInput
from authcore.application.services.refresh_sessions import RefreshSessions


logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    """Use case for ending a refresh session."""

    def __init__(self, sessions: RefreshSessions):
        """
        Initialize use case.

        Args:
            sessions: Refresh session bookkeeping
        """
        self.sessions = sessions

    async def execute(self, input_dto: LogoutInput) -> None:
        """
        Delete the session of a refresh token.

        Idempotent: logging out an unknown or already revoked token is
        not an error.

        Args:
            input_dto: Refresh token to revoke

        Raises:
            StoreError: If the session store fails
        """
        removed = await self.sessions.revoke(input_dto.refresh_token)
        logger.info("Logout processed (session %s)", "revoked" if removed else "absent")
