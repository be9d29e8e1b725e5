"""Activity (audit trail) model module."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenderdesk.models.base import Base, enum_type, utcnow
from tenderdesk.models.enums import ActivityType


class Activity(Base):
    """Append-only row; the application never updates or deletes it."""

    __tablename__ = "activities"
    __table_args__ = (Index("idx_activities_timestamp", "timestamp"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tender_id: Mapped[int | None] = mapped_column(ForeignKey("tenders.id", ondelete="SET NULL"), index=True)
    activity_type: Mapped[ActivityType] = mapped_column(enum_type(ActivityType), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User")
