"""Domain entities."""

from authcore.domain.entities.role import Role
from authcore.domain.entities.user import User

__all__ = ["Role", "User"]
