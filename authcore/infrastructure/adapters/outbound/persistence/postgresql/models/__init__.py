"""SQLAlchemy models."""

from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    RoleModel,
    UserModel,
    UserRoleModel,
)

__all__ = ["Base", "RoleModel", "UserModel", "UserRoleModel"]
