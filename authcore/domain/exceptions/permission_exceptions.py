"""Permission and authorization domain exceptions."""

from authcore.domain.exceptions.base import DomainException


class PermissionDomainException(DomainException):
    """Base exception for permission-related domain errors."""


class InsufficientPermissionsError(PermissionDomainException):
    """Raised when a principal lacks required permissions."""

    def __init__(self, subject: str, missing: list[str]):
        self.subject = subject
        self.missing = list(missing)
        super().__init__(
            message=f"{subject} lacks required permission(s): {', '.join(self.missing)}",
            code="INSUFFICIENT_PERMISSIONS"
        )


class InsufficientRoleError(PermissionDomainException):
    """Raised when a principal does not hold the required roles."""

    def __init__(self, subject: str, required: list[str], mode: str = "any"):
        self.subject = subject
        self.required = list(required)
        self.mode = mode
        super().__init__(
            message=f"{subject} requires {mode} of roles: {', '.join(self.required)}",
            code="INSUFFICIENT_ROLE"
        )


class InvalidPermissionError(PermissionDomainException):
    """Raised when a permission identifier is invalid."""

    def __init__(self, permission: str):
        super().__init__(
            message=f"Invalid permission: {permission!r}",
            code="INVALID_PERMISSION"
        )


class InvalidRoleError(PermissionDomainException):
    """Raised when a role is invalid."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid role: {reason}",
            code="INVALID_ROLE"
        )
