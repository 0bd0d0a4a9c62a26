"""Data Transfer Objects."""

from authcore.application.dto.auth_dto import (
    AuthenticatedPrincipal,
    AuthOutput,
    LoginInput,
    LogoutInput,
    PrincipalOutput,
    RefreshTokenInput,
    RegisterUserInput,
    UserProfileOutput,
)
from authcore.application.dto.token_dto import TokenClaims, TokenPair, TokenType
from authcore.application.dto.user_dto import UpdateUserProfileInput, UserListOutput

__all__ = [
    "AuthenticatedPrincipal",
    "AuthOutput",
    "LoginInput",
    "LogoutInput",
    "PrincipalOutput",
    "RefreshTokenInput",
    "RegisterUserInput",
    "TokenClaims",
    "TokenPair",
    "TokenType",
    "UpdateUserProfileInput",
    "UserListOutput",
    "UserProfileOutput",
]
