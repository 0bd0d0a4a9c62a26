"""Security adapters: password hashing and token issuance."""

from authcore.infrastructure.security.jwt_token_issuer import JWTTokenIssuer, TokenIssuerConfig
from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher

__all__ = ["Argon2PasswordHasher", "JWTTokenIssuer", "TokenIssuerConfig"]
