"""Permission resolver domain service."""

from collections.abc import Iterable
from dataclasses import dataclass

from authcore.domain.entities.role import Role
from authcore.domain.exceptions import (
    InsufficientPermissionsError,
    InsufficientRoleError,
)
from authcore.domain.value_objects.permission import Permission


@dataclass(frozen=True)
class PermissionSet:
    """
    Effective permissions of a principal.

    ``grants_all`` is set when any role carries the wildcard; the
    universe of permissions is never materialized.
    """

    permissions: frozenset[str]
    grants_all: bool = False

    def __contains__(self, permission: object) -> bool:
        if isinstance(permission, Permission):
            permission = permission.value
        return self.grants_all or permission in self.permissions

    def __len__(self) -> int:
        return len(self.permissions)


def _value(permission: Permission | str) -> str:
    # Queried strings are compared as-is; format rules apply to stored grants only
    if isinstance(permission, Permission):
        return permission.value
    return permission


class PermissionResolver:
    """
    Domain service evaluating role and permission grants.

    All checks are pure functions over roles that were already fetched
    for the principal; nothing here touches a store.
    """

    @staticmethod
    def effective_permissions(roles: Iterable[Role]) -> PermissionSet:
        """
        Union of the permissions of all roles.

        Args:
            roles: Roles held by the principal

        Returns:
            The effective permission set
        """
        values: set[str] = set()
        grants_all = False
        for role in roles:
            for permission in role.permissions:
                if permission.is_wildcard:
                    grants_all = True
                values.add(permission.value)
        return PermissionSet(frozenset(values), grants_all)

    @staticmethod
    def has_permission(roles: Iterable[Role], permission: Permission | str) -> bool:
        return _value(permission) in PermissionResolver.effective_permissions(roles)

    @staticmethod
    def has_all_permissions(
        roles: Iterable[Role], *permissions: Permission | str
    ) -> bool:
        """
        Check that every requested permission is granted.

        An empty request is vacuously satisfied.

        Args:
            roles: Roles held by the principal
            *permissions: Required permissions

        Returns:
            True if all permissions are granted
        """
        effective = PermissionResolver.effective_permissions(roles)
        return all(_value(p) in effective for p in permissions)

    @staticmethod
    def has_any_permission(
        roles: Iterable[Role], *permissions: Permission | str
    ) -> bool:
        """True if at least one of the permissions is granted."""
        effective = PermissionResolver.effective_permissions(roles)
        return any(_value(p) in effective for p in permissions)

    @staticmethod
    def has_any_role(roles: Iterable[Role], *names: str) -> bool:
        """
        Check role membership by name, case-insensitively.

        Args:
            roles: Roles held by the principal
            *names: Acceptable role names

        Returns:
            True if the principal holds at least one of the names.
            False when no names are given.
        """
        held = {role.name.casefold() for role in roles}
        return any(name.casefold() in held for name in names)

    @staticmethod
    def has_all_roles(roles: Iterable[Role], *names: str) -> bool:
        """True if every named role is held (case-insensitive); vacuous for no names."""
        held = {role.name.casefold() for role in roles}
        return all(name.casefold() in held for name in names)

    @staticmethod
    def missing_permissions(
        roles: Iterable[Role], *permissions: Permission | str
    ) -> list[str]:
        effective = PermissionResolver.effective_permissions(roles)
        return [_value(p) for p in permissions if _value(p) not in effective]

    @staticmethod
    def check_permissions(
        subject: str, roles: Iterable[Role], *permissions: Permission | str
    ) -> None:
        """
        Require all of the given permissions.

        Args:
            subject: Identifier of the principal, used in the error
            roles: Roles held by the principal
            *permissions: Required permissions

        Raises:
            InsufficientPermissionsError: If any permission is missing
        """
        missing = PermissionResolver.missing_permissions(roles, *permissions)
        if missing:
            raise InsufficientPermissionsError(subject, missing)

    @staticmethod
    def check_any_role(subject: str, roles: Iterable[Role], *names: str) -> None:
        """
        Require at least one of the given roles.

        Raises:
            InsufficientRoleError: If none of the roles is held
        """
        if not PermissionResolver.has_any_role(roles, *names):
            raise InsufficientRoleError(subject, list(names), mode="any")

    @staticmethod
    def check_all_roles(subject: str, roles: Iterable[Role], *names: str) -> None:
        """
        Require every one of the given roles.

        Raises:
            InsufficientRoleError: If a role is missing
        """
        if not PermissionResolver.has_all_roles(roles, *names):
            raise InsufficientRoleError(subject, list(names), mode="all")
