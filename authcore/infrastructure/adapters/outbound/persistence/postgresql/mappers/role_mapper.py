"""Mapper between Role domain entity and RoleModel database model."""

from typing import Optional

from authcore.domain.entities.role import Role
from authcore.domain.value_objects.permission import Permission
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    RoleModel,
)


class RoleMapper:
    """Mapper between Role entity and RoleModel."""

    @staticmethod
    def to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            description=model.description,
            permissions=[Permission(p) for p in (model.permissions or [])],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_model(entity: Role, existing_model: Optional[RoleModel] = None) -> RoleModel:
        """
        Convert domain entity to SQLAlchemy model.

        Permissions are stored as a JSONB array of strings.
        """
        if existing_model:
            existing_model.name = entity.name
            existing_model.description = entity.description
            existing_model.permissions = entity.permission_values()
            return existing_model

        return RoleModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            permissions=entity.permission_values(),
        )
