"""Shared SQLAlchemy base and common mixins for the TenderDesk schema."""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp helper."""
    return datetime.now(timezone.utc)


def enum_type(enum_cls: type[enum.Enum]) -> Enum:
    """Persist enum *values* (``"open"``) rather than member names (``"OPEN"``)."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=40,
        validate_strings=True,
    )


class Base(DeclarativeBase):
    """Declarative base class for the TenderDesk schema."""


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class TimestampMixin(CreatedAtMixin):
    """Standard audit fields for mutable business rows."""

    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
