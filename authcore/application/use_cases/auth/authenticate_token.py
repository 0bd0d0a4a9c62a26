"""Authenticate access token use case."""

import logging

from authcore.application.dto.auth_dto import AuthenticatedPrincipal
from authcore.application.dto.token_dto import TokenType
from authcore.application.exceptions import AccountDisabledError, CredentialError
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort


logger = logging.getLogger(__name__)


class AuthenticateTokenUseCase:
    """Use case resolving a bearer access token to a principal."""

    def __init__(self, uow: UnitOfWorkPort, token_issuer: TokenIssuerPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            token_issuer: Token issuer adapter
        """
        self.uow = uow
        self.token_issuer = token_issuer

    async def execute(self, access_token: str) -> AuthenticatedPrincipal:
        """
        Validate an access token and load the user with their roles.

        A refresh token is rejected here; refreshing is always an explicit
        client action.

        Args:
            access_token: Bearer token

        Returns:
            The authenticated principal

        Raises:
            TokenError: If the token fails validation or is not an access token
            CredentialError: If the user no longer exists
            AccountDisabledError: If the user is disabled
            StoreError: If the identity store fails
        """
        claims = self.token_issuer.validate(access_token, expected_type=TokenType.ACCESS)

        async with self.uow:
            user = await self.uow.users.get_by_id(claims.user_id)
            if user is None:
                logger.warning("Token subject %s no longer exists", claims.user_id)
                raise CredentialError("User not found", reason="user_not_found")

            if not user.is_active:
                logger.warning("Access denied for disabled user %s", user.id)
                raise AccountDisabledError()

            roles = await self.uow.users.get_user_roles(user.id)

        return AuthenticatedPrincipal(user=user, roles=roles)
