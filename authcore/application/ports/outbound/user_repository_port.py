"""User repository port interface."""

from typing import Optional, Protocol
from uuid import UUID

from authcore.domain.entities.role import Role
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email


class UserRepositoryPort(Protocol):
    """
    Repository interface for User entity.

    Soft-deleted users are invisible to every lookup. Infrastructure
    failures surface as StoreError (StoreTimeoutError on deadline).
    """

    async def add(self, user: User) -> User:
        """
        Add a new user to the repository.

        Args:
            user: User entity to add

        Returns:
            Created user entity with updated metadata

        Raises:
            EmailAlreadyRegisteredError: If a live user already has this email
        """
        ...

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Retrieve user by ID.

        Args:
            user_id: User's unique identifier

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def get_by_email(self, email: Email) -> Optional[User]:
        """
        Retrieve user by email address (exact, case-sensitive match).

        Args:
            email: User's email value object

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def exists_by_email(self, email: Email) -> bool:
        """
        Check if a live user with this email exists.

        Args:
            email: Email to check

        Returns:
            True if the email is taken
        """
        ...

    async def update(self, user: User) -> User:
        """
        Persist changes of an existing user.

        A user whose ``deleted_at`` is set by the update becomes invisible
        to every later lookup.

        Raises:
            NotFoundError: If user doesn't exist
        """
        ...

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        """
        List live users, oldest first.

        Args:
            skip: Number of users to skip
            limit: Maximum number of users to return

        Returns:
            Page of users
        """
        ...

    async def count(self) -> int:
        """Number of live users."""
        ...

    async def get_user_roles(self, user_id: UUID) -> list[Role]:
        """
        Retrieve roles assigned to a user.

        Args:
            user_id: User's unique identifier

        Returns:
            Roles ordered by name (empty list if none)
        """
        ...
