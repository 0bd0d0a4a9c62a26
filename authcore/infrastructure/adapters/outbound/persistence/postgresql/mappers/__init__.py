"""Entity ↔ model mappers."""

from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import RoleMapper
from authcore.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_mapper import UserMapper

__all__ = ["RoleMapper", "UserMapper"]
