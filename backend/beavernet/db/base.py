"""SQLAlchemy Declarative Base - shared base class and timestamp columns.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Timestamp columns are timezone-aware; storage sets them explicitly
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all BeaverNet ORM models."""
    pass


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )


class UpdatedAtMixin:
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )


class TimestampMixin(CreatedAtMixin, UpdatedAtMixin):
    pass
