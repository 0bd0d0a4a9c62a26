"""
Reusable mixins for database models.

- TimestampMixin: created_at and updated_at timestamps
- SoftDeleteMixin: soft delete with deleted_at timestamp
"""

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """
    Mixin to add timestamp columns to models.

    Both timestamps use UTC timezone; updated_at is refreshed on update.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


class SoftDeleteMixin:
    """
    Mixin to add soft delete functionality to models.

    Soft deleted rows stay in the table for referential integrity but are
    filtered out of normal queries. Unique constraints on such tables must
    be partial indexes (``WHERE deleted_at IS NULL``).
    """

    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
