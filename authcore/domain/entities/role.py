"""Role domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from authcore.domain.exceptions import InvalidRoleError
from authcore.domain.value_objects.permission import Permission


MAX_ROLE_NAME_LENGTH = 50


@dataclass
class Role:
    """
    Role entity representing a named collection of permissions.

    A role carrying the wildcard permission ``*`` grants everything.
    An empty permission set is allowed and grants nothing.
    """

    id: UUID
    name: str
    description: str | None = None
    permissions: list[Permission] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate role after initialization."""
        if not self.name or not self.name.strip():
            raise InvalidRoleError("role name cannot be empty")

        if len(self.name) > MAX_ROLE_NAME_LENGTH:
            raise InvalidRoleError(
                f"role name cannot exceed {MAX_ROLE_NAME_LENGTH} characters"
            )

        self.permissions = [
            p if isinstance(p, Permission) else Permission(p)
            for p in self.permissions
        ]

    @property
    def grants_all(self) -> bool:
        """True if this role carries the wildcard permission."""
        return any(p.is_wildcard for p in self.permissions)

    def has_permission(self, permission: Permission | str) -> bool:
        """
        Check if this role grants a specific permission.

        Args:
            permission: Permission to check

        Returns:
            True if the role holds the permission or the wildcard
        """
        if isinstance(permission, str):
            permission = Permission(permission)
        return self.grants_all or permission in self.permissions

    def add_permission(self, permission: Permission) -> None:
        if permission not in self.permissions:
            self.permissions.append(permission)

    def remove_permission(self, permission: Permission) -> None:
        if permission in self.permissions:
            self.permissions.remove(permission)

    def permission_values(self) -> list[str]:
        """Permission strings in storage order."""
        return [p.value for p in self.permissions]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
