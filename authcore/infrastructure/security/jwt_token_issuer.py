"""
JWT token issuance and validation.

Tokens are HS256-signed JWS compact strings carrying ``sub``, ``type``,
``jti``, ``iss``, ``iat`` and ``exp`` claims; access tokens also carry
``email``. The header algorithm is checked before any claim is trusted.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from authcore.application.dto.token_dto import TokenClaims, TokenType
from authcore.application.exceptions import (
    MalformedTokenError,
    TokenExpiredError,
    TokenSignatureError,
    UnexpectedAlgorithmError,
)


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ("sub", "type", "jti", "iss", "iat", "exp")


@dataclass(frozen=True)
class TokenIssuerConfig:
    """Immutable signing configuration, built once at startup."""

    secret: str
    access_ttl: timedelta
    refresh_ttl: timedelta
    issuer: str
    algorithm: str = ALGORITHM

    def __post_init__(self) -> None:
        if len(self.secret) < 32:
            raise ValueError("Signing secret must be at least 32 characters")
        if self.algorithm != ALGORITHM:
            raise ValueError(f"Only {ALGORITHM} is supported")
        if self.access_ttl <= timedelta(0) or self.refresh_ttl <= timedelta(0):
            raise ValueError("Token lifetimes must be positive")

    def __repr__(self) -> str:
        return (
            f"TokenIssuerConfig(secret=***, access_ttl={self.access_ttl!r}, "
            f"refresh_ttl={self.refresh_ttl!r}, issuer={self.issuer!r})"
        )


class JWTTokenIssuer:
    """Token issuer adapter backed by python-jose."""

    def __init__(self, config: TokenIssuerConfig):
        """
        Initialize the issuer.

        Args:
            config: Signing configuration
        """
        self._config = config

    @property
    def access_ttl_seconds(self) -> int:
        """Lifetime of access tokens, reported to clients as ``expires_in``."""
        return int(self._config.access_ttl.total_seconds())

    @property
    def refresh_ttl_seconds(self) -> int:
        """Lifetime of refresh tokens, also the TTL of their sessions."""
        return int(self._config.refresh_ttl.total_seconds())

    def _encode(self, claims: dict[str, Any], ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "jti": str(uuid.uuid4()),
            "iss": self._config.issuer,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def issue_access_token(self, user_id: UUID, email: str) -> str:
        """
        Create a signed access token.

        Args:
            user_id: Subject
            email: Subject's email

        Returns:
            Encoded token
        """
        return self._encode(
            {"sub": str(user_id), "email": email, "type": TokenType.ACCESS.value},
            self._config.access_ttl,
        )

    def issue_refresh_token(self, user_id: UUID) -> str:
        """
        Create a signed refresh token. It carries no email.

        Args:
            user_id: Subject

        Returns:
            Encoded token
        """
        return self._encode(
            {"sub": str(user_id), "type": TokenType.REFRESH.value},
            self._config.refresh_ttl,
        )

    def validate(
        self, token: str, expected_type: Optional[TokenType] = None
    ) -> TokenClaims:
        """
        Verify a token and return its claims.

        Args:
            token: Encoded token
            expected_type: Required token type, if any

        Returns:
            Decoded claims

        Raises:
            MalformedTokenError: If token is unparseable, lacks claims or has the wrong type
            UnexpectedAlgorithmError: If the header algorithm is not HS256
            TokenSignatureError: If the signature does not verify
            TokenExpiredError: If the token is expired
        """
        if not token or token.count(".") != 2:
            raise MalformedTokenError()

        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise MalformedTokenError() from e

        algorithm = header.get("alg")
        if algorithm != self._config.algorithm:
            logger.warning("Rejected token signed with unexpected algorithm %r", algorithm)
            raise UnexpectedAlgorithmError(algorithm)

        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                issuer=self._config.issuer,
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTClaimsError as e:
            raise MalformedTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            raise TokenSignatureError() from e

        return self._to_claims(payload, expected_type)

    @staticmethod
    def _to_claims(
        payload: dict[str, Any], expected_type: Optional[TokenType]
    ) -> TokenClaims:
        missing = [claim for claim in REQUIRED_CLAIMS if claim not in payload]
        if missing:
            raise MalformedTokenError(f"Token is missing claims: {', '.join(missing)}")

        try:
            token_type = TokenType(payload["type"])
            user_id = UUID(str(payload["sub"]))
            issued_at = datetime.fromtimestamp(payload["iat"], UTC)
            expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        except (TypeError, ValueError) as e:
            raise MalformedTokenError() from e

        if expected_type is not None and token_type != expected_type:
            raise MalformedTokenError(f"Expected a {expected_type.value} token")

        if token_type == TokenType.ACCESS and not payload.get("email"):
            raise MalformedTokenError("Access token is missing claims: email")

        return TokenClaims(
            user_id=user_id,
            token_type=token_type,
            email=payload.get("email"),
            issuer=payload["iss"],
            issued_at=issued_at,
            expires_at=expires_at,
            jti=str(payload["jti"]),
        )
