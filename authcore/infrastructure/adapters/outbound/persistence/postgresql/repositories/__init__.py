"""PostgreSQL repositories."""

from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)

__all__ = ["PostgresRoleRepository", "PostgresUserRepository"]
