"""User domain entity."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from authcore.domain.exceptions import (
    InvalidDisplayNameError,
    InvalidUserStateTransitionError,
)
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash


MAX_NAME_LENGTH = 255
MAX_AVATAR_URL_LENGTH = 500


def validate_display_name(name: str) -> str:
    """
    Validate and trim a display name.

    Args:
        name: Raw display name

    Returns:
        The trimmed name

    Raises:
        InvalidDisplayNameError: If the name is empty or too long
    """
    if not name or not name.strip():
        raise InvalidDisplayNameError("name cannot be empty")

    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidDisplayNameError(
            f"name cannot exceed {MAX_NAME_LENGTH} characters"
        )
    return name


@dataclass
class User:
    """
    User entity representing an account holder.

    A user authenticates with email and password. Roles are not part of
    the entity; they are fetched separately when a request is authorized.
    """

    id: UUID
    email: Email
    password_hash: PasswordHash
    name: str
    avatar_url: str | None = None
    is_active: bool = True
    email_verified_at: datetime | None = None
    last_login_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate user after initialization."""
        self.name = validate_display_name(self.name)

        if self.avatar_url is not None and len(self.avatar_url) > MAX_AVATAR_URL_LENGTH:
            raise ValueError(
                f"Avatar URL cannot exceed {MAX_AVATAR_URL_LENGTH} characters"
            )

    def activate(self) -> None:
        """
        Activate this user account.

        Raises:
            InvalidUserStateTransitionError: If user is already active or deleted
        """
        if self.is_deleted():
            raise InvalidUserStateTransitionError("deleted", "activate")
        if self.is_active:
            raise InvalidUserStateTransitionError("active", "activate")
        self.is_active = True

    def deactivate(self) -> None:
        """
        Deactivate (disable) this user account.

        Raises:
            InvalidUserStateTransitionError: If user is already inactive
        """
        if not self.is_active:
            raise InvalidUserStateTransitionError("inactive", "deactivate")
        self.is_active = False

    def change_password(self, new_password_hash: PasswordHash) -> None:
        """
        Replace the stored password hash.

        Args:
            new_password_hash: New password hash
        """
        self.password_hash = new_password_hash

    def update_profile(
        self, name: str | None = None, avatar_url: str | None = None
    ) -> None:
        """
        Update display name and/or avatar.

        Args:
            name: New display name (unchanged if None)
            avatar_url: New avatar URL (unchanged if None)
        """
        if name is not None:
            self.name = validate_display_name(name)
        if avatar_url is not None:
            if len(avatar_url) > MAX_AVATAR_URL_LENGTH:
                raise ValueError(
                    f"Avatar URL cannot exceed {MAX_AVATAR_URL_LENGTH} characters"
                )
            self.avatar_url = avatar_url

    def mark_email_verified(self) -> None:
        if self.email_verified_at is None:
            self.email_verified_at = datetime.now(UTC)

    @property
    def is_email_verified(self) -> bool:
        return self.email_verified_at is not None

    def record_login(self) -> None:
        """Record that user logged in."""
        self.last_login_at = datetime.now(UTC)

    def is_deleted(self) -> bool:
        """
        Check if user is soft-deleted.

        Returns:
            True if user is deleted
        """
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """
        Soft delete this user.

        Raises:
            InvalidUserStateTransitionError: If user is already deleted
        """
        if self.is_deleted():
            raise InvalidUserStateTransitionError("deleted", "soft_delete")

        self.deleted_at = datetime.now(UTC)
        self.is_active = False

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"User(id={self.id}, email={self.email}, "
            f"is_active={self.is_active})"
        )
