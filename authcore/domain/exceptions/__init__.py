"""Domain exceptions."""

from authcore.domain.exceptions.base import DomainException
from authcore.domain.exceptions.permission_exceptions import (
    InsufficientPermissionsError,
    InsufficientRoleError,
    InvalidPermissionError,
    InvalidRoleError,
    PermissionDomainException,
)
from authcore.domain.exceptions.user_exceptions import (
    InvalidDisplayNameError,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidUserStateTransitionError,
    UserDomainException,
)

__all__ = [
    "DomainException",
    "InsufficientPermissionsError",
    "InsufficientRoleError",
    "InvalidDisplayNameError",
    "InvalidEmailError",
    "InvalidPasswordError",
    "InvalidPermissionError",
    "InvalidRoleError",
    "InvalidUserStateTransitionError",
    "PermissionDomainException",
    "UserDomainException",
]
