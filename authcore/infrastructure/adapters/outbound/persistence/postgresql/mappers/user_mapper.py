"""
Mapper between User domain entity and UserModel database model.

This is the only place where user entity ↔ model conversion happens.
"""

from typing import Optional

from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    UserModel,
)


class UserMapper:
    """Mapper between User entity and UserModel."""

    @staticmethod
    def to_entity(model: UserModel) -> User:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: UserModel from database

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            email=Email(model.email),
            password_hash=PasswordHash(model.password_hash),
            name=model.name,
            avatar_url=model.avatar_url,
            is_active=model.is_active,
            email_verified_at=model.email_verified_at,
            last_login_at=model.last_login_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    @staticmethod
    def to_model(entity: User, existing_model: Optional[UserModel] = None) -> UserModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: User domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            UserModel for database persistence
        """
        if existing_model:
            existing_model.email = entity.email.value
            existing_model.password_hash = entity.password_hash.value
            existing_model.name = entity.name
            existing_model.avatar_url = entity.avatar_url
            existing_model.is_active = entity.is_active
            existing_model.email_verified_at = entity.email_verified_at
            existing_model.last_login_at = entity.last_login_at
            existing_model.deleted_at = entity.deleted_at
            return existing_model

        model = UserModel(
            id=entity.id,
            email=entity.email.value,
            password_hash=entity.password_hash.value,
            name=entity.name,
            avatar_url=entity.avatar_url,
            is_active=entity.is_active,
            email_verified_at=entity.email_verified_at,
            last_login_at=entity.last_login_at,
            deleted_at=entity.deleted_at,
        )
        # Leave timestamps unset so column defaults apply
        if entity.created_at is not None:
            model.created_at = entity.created_at
        if entity.updated_at is not None:
            model.updated_at = entity.updated_at
        return model
