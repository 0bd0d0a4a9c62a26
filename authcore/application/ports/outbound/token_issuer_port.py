"""Token issuer port interface."""

from typing import Optional, Protocol
from uuid import UUID

from authcore.application.dto.token_dto import TokenClaims, TokenType


class TokenIssuerPort(Protocol):
    """Issues and validates signed access and refresh tokens."""

    access_ttl_seconds: int
    refresh_ttl_seconds: int

    def issue_access_token(self, user_id: UUID, email: str) -> str:
        ...

    def issue_refresh_token(self, user_id: UUID) -> str:
        ...

    def validate(
        self, token: str, expected_type: Optional[TokenType] = None
    ) -> TokenClaims:
        """
        Validate a token and return its claims.

        Args:
            token: Encoded token
            expected_type: Required token type, if any

        Returns:
            Decoded claims

        Raises:
            MalformedTokenError: If token is unparseable, lacks claims or has the wrong type
            UnexpectedAlgorithmError: If the header algorithm is not the configured one
            TokenSignatureError: If the signature does not verify
            TokenExpiredError: If the token is expired
        """
        ...
