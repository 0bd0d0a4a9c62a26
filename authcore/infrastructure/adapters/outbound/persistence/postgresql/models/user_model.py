"""
User, Role, and UserRole SQLAlchemy models.

- UserModel: account with credentials and profile
- RoleModel: named permission bundle with JSONB permissions
- UserRoleModel: association between users and roles
"""

import uuid
from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    SoftDeleteMixin,
    TimestampMixin,
)


EMAIL_CHECK = r"email ~ '^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'"


class UserModel(Base, TimestampMixin, SoftDeleteMixin):
    """
    User SQLAlchemy model.

    Pure persistence; behaviour lives in domain.entities.user.User.

    Soft Delete:
        Deleted users keep their row. Email uniqueness only applies to
        live rows (partial unique index), so an email can be registered
        again after its account was deleted.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(EMAIL_CHECK, name="email_format"),
        Index(
            "ix_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    email: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    avatar_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    email_verified_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    last_login_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id}, email={self.email})"


class RoleModel(Base, TimestampMixin):
    """
    Role SQLAlchemy model.

    Permissions are a JSONB array of strings; ``"*"`` grants everything.
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    permissions: Mapped[list[str]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )

    def __repr__(self) -> str:
        return f"RoleModel(id={self.id}, name={self.name})"


class UserRoleModel(Base):
    """Assignment of a role to a user; removed with either side."""

    __tablename__ = "user_roles"
    __table_args__ = (UniqueConstraint("user_id", "role_id", name="uq_user_roles_user_role"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
