"""Refresh token use case."""

import logging

from authcore.application.dto.auth_dto import (
    AuthOutput,
    RefreshTokenInput,
    UserProfileOutput,
)
from authcore.application.dto.token_dto import TokenType
from authcore.application.exceptions import (
    AccountDisabledError,
    MalformedTokenError,
    NotFoundError,
    SessionNotFoundError,
)
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.services.refresh_sessions import RefreshSessions
from authcore.application.use_cases.auth._tokens import issue_token_pair


logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """Use case for rotating a refresh token into a new credential pair."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        token_issuer: TokenIssuerPort,
        sessions: RefreshSessions,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            token_issuer: Token issuer adapter
            sessions: Refresh session bookkeeping
        """
        self.uow = uow
        self.token_issuer = token_issuer
        self.sessions = sessions

    async def execute(self, input_dto: RefreshTokenInput) -> AuthOutput:
        """
        Exchange a live refresh token for a new pair.

        The old session is consumed and the new one registered in a single
        atomic store operation, so of two concurrent refreshes of the same
        token exactly one succeeds.

        Args:
            input_dto: Refresh token data

        Returns:
            New credential pair and user profile

        Raises:
            SessionNotFoundError: If the token has no live session (never issued,
                already rotated, logged out or expired)
            TokenError: If the token itself fails validation
            NotFoundError: If the user was deleted since issuance
            AccountDisabledError: If the user was disabled since issuance
            StoreError: If the identity or session store fails
        """
        refresh_token = input_dto.refresh_token

        bound_user_id = await self.sessions.lookup(refresh_token)
        if bound_user_id is None:
            logger.info("Refresh rejected: no live session")
            raise SessionNotFoundError()

        claims = self.token_issuer.validate(refresh_token, expected_type=TokenType.REFRESH)
        if str(claims.user_id) != bound_user_id:
            logger.warning(
                "Refresh rejected: session bound to %s but token subject is %s",
                bound_user_id,
                claims.user_id,
            )
            raise MalformedTokenError("Refresh token does not match its session")

        async with self.uow:
            user = await self.uow.users.get_by_id(claims.user_id)

        if user is None:
            raise NotFoundError("User not found", resource_type="User", resource_id=str(claims.user_id))

        if not user.is_active:
            logger.warning("Refresh refused for disabled user %s", user.id)
            raise AccountDisabledError()

        tokens = issue_token_pair(self.token_issuer, user)

        if not await self.sessions.rotate(refresh_token, tokens.refresh_token, user.id):
            raise SessionNotFoundError()

        logger.info("Refresh token rotated for user %s", user.id)

        return AuthOutput(tokens=tokens, user=UserProfileOutput.from_entity(user))
