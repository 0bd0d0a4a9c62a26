"""Role repository port interface."""

from typing import Optional, Protocol
from uuid import UUID

from authcore.domain.entities.role import Role


class RoleRepositoryPort(Protocol):
    """Repository interface for Role entity."""

    async def add(self, role: Role) -> Role:
        """
        Add a new role.

        Raises:
            AlreadyExistsError: If a role with same name exists
        """
        ...

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        ...

    async def get_by_name(self, name: str) -> Optional[Role]:
        """
        Retrieve role by its unique name.

        Args:
            name: Role name

        Returns:
            Role entity if found, None otherwise
        """
        ...

    async def list_all(self) -> list[Role]:
        ...

    async def assign_to_user(self, user_id: UUID, role_id: UUID) -> None:
        """
        Assign a role to a user. Assigning an already held role is a no-op.

        Args:
            user_id: User's unique identifier
            role_id: Role's unique identifier
        """
        ...

    async def remove_from_user(self, user_id: UUID, role_id: UUID) -> None:
        """
        Remove a role from a user. Removing a role that is not held is a no-op.
        """
        ...
