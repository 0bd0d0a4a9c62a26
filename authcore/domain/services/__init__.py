"""Domain services."""

from authcore.domain.services.permission_resolver import PermissionResolver, PermissionSet
from authcore.domain.services.user_validation_service import UserValidationService

__all__ = ["PermissionResolver", "PermissionSet", "UserValidationService"]
