"""Credential pair issuance shared by the auth use cases."""

from authcore.application.dto.token_dto import TokenPair
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.domain.entities.user import User


def issue_token_pair(token_issuer: TokenIssuerPort, user: User) -> TokenPair:
    """
    Issue an access and a refresh token for a user.

    Args:
        token_issuer: Token issuer adapter
        user: Token subject

    Returns:
        The new credential pair
    """
    return TokenPair(
        access_token=token_issuer.issue_access_token(user.id, user.email.value),
        refresh_token=token_issuer.issue_refresh_token(user.id),
        token_type="bearer",
        expires_in=token_issuer.access_ttl_seconds,
    )
