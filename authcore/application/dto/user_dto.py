"""User DTOs (Data Transfer Objects)."""

from typing import Optional

from pydantic import BaseModel, Field

from authcore.application.dto.auth_dto import UserProfileOutput
from authcore.domain.entities.user import MAX_AVATAR_URL_LENGTH, MAX_NAME_LENGTH


class UpdateUserProfileInput(BaseModel):
    """Input DTO for updating the caller's profile. Omitted fields stay unchanged."""

    name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH, description="Display name")
    avatar_url: Optional[str] = Field(
        None, max_length=MAX_AVATAR_URL_LENGTH, description="Avatar URL"
    )

    model_config = {"frozen": True}


class UserListOutput(BaseModel):
    """Output DTO for a page of users."""

    users: list[UserProfileOutput] = Field(..., description="List of users")
    total: int = Field(..., description="Total number of live users")
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Number of users skipped")

    model_config = {"frozen": True}
