"""Token DTOs."""

from datetime import datetime
from enum import StrEnum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class TokenType(StrEnum):
    """Value of the ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"


class TokenClaims(BaseModel):
    """Claims carried by a validated token."""

    user_id: UUID = Field(..., description="Subject of the token")
    token_type: TokenType = Field(..., description="Access or refresh")
    email: Optional[str] = Field(None, description="Email (access tokens only)")
    issuer: str = Field(..., description="Token issuer")
    issued_at: datetime = Field(..., description="Issue time")
    expires_at: datetime = Field(..., description="Expiry time")
    jti: str = Field(..., description="Unique token id")

    model_config = {"frozen": True}


class TokenPair(BaseModel):
    """Access and refresh token issued together."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    model_config = {"frozen": True}
