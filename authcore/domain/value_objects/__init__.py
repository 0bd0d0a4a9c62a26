"""Domain value objects."""

from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.domain.value_objects.permission import WILDCARD, Permission

__all__ = ["Email", "PasswordHash", "Permission", "WILDCARD"]
