"""Authentication DTOs (Data Transfer Objects)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from authcore.application.dto.token_dto import TokenPair
from authcore.domain.entities.role import Role
from authcore.domain.entities.user import User


class RegisterUserInput(BaseModel):
    """
    Input DTO for user registration.

    Email and password rules are enforced by the use case so that the
    reported error follows the documented validation order.
    """

    email: str = Field(..., max_length=255, description="User's email address")
    password: str = Field(..., max_length=128, description="User's password")
    name: str = Field(..., max_length=255, description="Display name")

    model_config = {"frozen": True}


class LoginInput(BaseModel):
    """Input DTO for user login."""

    email: str = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")

    model_config = {"frozen": True}


class RefreshTokenInput(BaseModel):
    """Input DTO for token refresh."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")

    model_config = {"frozen": True}


class LogoutInput(BaseModel):
    """Input DTO for logout."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token to revoke")

    model_config = {"frozen": True}


class UserProfileOutput(BaseModel):
    """Output DTO for user profile information. Never carries the password hash."""

    id: UUID = Field(..., description="User's unique identifier")
    email: str = Field(..., description="User's email address")
    name: str = Field(..., description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    is_active: bool = Field(..., description="Whether user account is active")
    email_verified: bool = Field(..., description="Whether the email was verified")
    last_login_at: Optional[datetime] = Field(None, description="Last login timestamp")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, user: User) -> "UserProfileOutput":
        """
        Create DTO from User entity.

        Args:
            user: User domain entity

        Returns:
            UserProfileOutput DTO
        """
        return cls(
            id=user.id,
            email=user.email.value,
            name=user.name,
            avatar_url=user.avatar_url,
            is_active=user.is_active,
            email_verified=user.is_email_verified,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthOutput(BaseModel):
    """Output DTO of register, login and refresh: a credential pair plus the profile."""

    tokens: TokenPair = Field(..., description="Issued credential pair")
    user: UserProfileOutput = Field(..., description="User profile information")

    model_config = {"frozen": True}


class PrincipalOutput(BaseModel):
    """Output DTO describing the authenticated principal."""

    user: UserProfileOutput
    roles: list[str] = Field(default_factory=list, description="Role names")
    permissions: list[str] = Field(default_factory=list, description="Effective permissions")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The user behind a validated access token, with their roles."""

    user: User
    roles: list[Role] = field(default_factory=list)

    @property
    def user_id(self) -> UUID:
        return self.user.id

    @property
    def role_names(self) -> list[str]:
        return [role.name for role in self.roles]
