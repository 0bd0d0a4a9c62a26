"""Unit tests for PermissionResolver domain service."""

from uuid import uuid4

import pytest

from authcore.domain.entities.role import Role
from authcore.domain.exceptions import (
    InsufficientPermissionsError,
    InsufficientRoleError,
)
from authcore.domain.services.permission_resolver import PermissionResolver
from authcore.domain.value_objects.permission import Permission


def make_role(name: str, *permissions: str) -> Role:
    return Role(id=uuid4(), name=name, permissions=list(permissions))


@pytest.fixture
def admin():
    return make_role("admin", "*")


@pytest.fixture
def user_role():
    return make_role("user", "workflow:read", "workflow:write", "workflow:execute", "workflow:delete")


@pytest.fixture
def viewer():
    return make_role("viewer", "workflow:read")


class TestEffectivePermissions:
    """Test the union of role permissions."""

    def test_union_of_roles(self, viewer):
        other = make_role("reporter", "report:read")
        effective = PermissionResolver.effective_permissions([viewer, other])

        assert effective.permissions == frozenset({"workflow:read", "report:read"})
        assert effective.grants_all is False
        assert len(effective) == 2

    def test_no_roles(self):
        effective = PermissionResolver.effective_permissions([])
        assert len(effective) == 0
        assert "workflow:read" not in effective

    def test_wildcard_sets_grants_all(self, admin, viewer):
        effective = PermissionResolver.effective_permissions([viewer, admin])
        assert effective.grants_all is True
        assert "anything:else" in effective
        assert Permission("workflow:read") in effective


class TestPermissionChecks:
    """Test has_permission / has_all_permissions / has_any_permission."""

    def test_has_permission(self, viewer):
        assert PermissionResolver.has_permission([viewer], "workflow:read") is True
        assert PermissionResolver.has_permission([viewer], "workflow:write") is False

    def test_wildcard_satisfies_every_check(self, admin):
        """Test '*' satisfies single, all-of and any-of checks."""
        assert PermissionResolver.has_permission([admin], "billing:refund") is True
        assert PermissionResolver.has_all_permissions([admin], "a:b", "c:d") is True
        assert PermissionResolver.has_any_permission([admin], "a:b") is True

    def test_has_all_permissions(self, user_role, viewer):
        assert PermissionResolver.has_all_permissions([user_role], "workflow:read", "workflow:write") is True
        assert PermissionResolver.has_all_permissions([viewer], "workflow:read", "workflow:write") is False

    def test_has_all_permissions_empty_is_vacuous(self):
        assert PermissionResolver.has_all_permissions([]) is True

    def test_has_any_permission(self, viewer):
        assert PermissionResolver.has_any_permission([viewer], "workflow:write", "workflow:read") is True
        assert PermissionResolver.has_any_permission([viewer], "workflow:write") is False

    def test_has_any_permission_empty_is_false(self, admin):
        """Test an empty any-of request is never satisfied, even by the wildcard."""
        assert PermissionResolver.has_any_permission([admin]) is False

    def test_user_without_roles_has_nothing(self):
        assert PermissionResolver.has_permission([], "workflow:read") is False

    @pytest.mark.parametrize("permission", ["", "workflow read", "x" * 101, "*"])
    def test_arbitrary_strings_return_a_bool(self, admin, viewer, permission):
        """Test queries never validate their input: wildcard holders get True, others False."""
        assert PermissionResolver.has_permission([admin], permission) is True
        assert PermissionResolver.has_all_permissions([admin], permission) is True
        assert PermissionResolver.has_permission([viewer], permission) is False
        assert PermissionResolver.has_permission([], permission) is False

    def test_check_permissions_reports_unconforming_string(self, viewer):
        with pytest.raises(InsufficientPermissionsError):
            PermissionResolver.check_permissions("user-1", [viewer], "has space")

    def test_missing_permissions(self, viewer):
        missing = PermissionResolver.missing_permissions(
            [viewer], "workflow:read", "workflow:write", "workflow:delete"
        )
        assert missing == ["workflow:write", "workflow:delete"]


class TestRoleChecks:
    """Test role membership checks."""

    def test_has_any_role_is_case_insensitive(self, admin):
        assert PermissionResolver.has_any_role([admin], "ADMIN") is True
        assert PermissionResolver.has_any_role([admin], "Viewer", "Admin") is True
        assert PermissionResolver.has_any_role([admin], "viewer") is False

    def test_has_any_role_without_names_is_false(self, admin):
        assert PermissionResolver.has_any_role([admin]) is False

    def test_has_all_roles(self, admin, viewer):
        assert PermissionResolver.has_all_roles([admin, viewer], "admin", "VIEWER") is True
        assert PermissionResolver.has_all_roles([viewer], "admin", "viewer") is False

    def test_has_all_roles_without_names_is_vacuous(self):
        assert PermissionResolver.has_all_roles([]) is True

    def test_wildcard_does_not_imply_roles(self, admin):
        """Test holding '*' says nothing about role names."""
        assert PermissionResolver.has_any_role([admin], "viewer") is False


class TestGuards:
    """Test the raising check_* helpers."""

    def test_check_permissions_passes(self, user_role):
        PermissionResolver.check_permissions("user-1", [user_role], "workflow:read")

    def test_check_permissions_reports_missing(self, viewer):
        with pytest.raises(InsufficientPermissionsError) as exc_info:
            PermissionResolver.check_permissions("user-1", [viewer], "workflow:read", "workflow:write")

        assert exc_info.value.missing == ["workflow:write"]
        assert exc_info.value.subject == "user-1"
        assert exc_info.value.code == "INSUFFICIENT_PERMISSIONS"

    def test_check_any_role(self, viewer):
        PermissionResolver.check_any_role("user-1", [viewer], "admin", "viewer")

        with pytest.raises(InsufficientRoleError) as exc_info:
            PermissionResolver.check_any_role("user-1", [viewer], "admin")
        assert exc_info.value.mode == "any"
        assert exc_info.value.required == ["admin"]

    def test_check_all_roles(self, admin, viewer):
        PermissionResolver.check_all_roles("user-1", [admin, viewer], "admin", "viewer")

        with pytest.raises(InsufficientRoleError) as exc_info:
            PermissionResolver.check_all_roles("user-1", [viewer], "admin", "viewer")
        assert exc_info.value.mode == "all"
