"""Lead model module."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenderdesk.models.base import Base, TimestampMixin, enum_type
from tenderdesk.models.enums import LeadStatus


class Lead(Base, TimestampMixin):
    __tablename__ = "leads"
    __table_args__ = (
        Index("idx_leads_status", "status"),
        Index("idx_leads_source", "source"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id", ondelete="RESTRICT"), nullable=False)
    contact_person: Mapped[str | None] = mapped_column(String(255))
    source: Mapped[str | None] = mapped_column(String(100))
    emd_value: Mapped[str] = mapped_column(String(50), default="0", nullable=False)
    status: Mapped[LeadStatus] = mapped_column(enum_type(LeadStatus), default=LeadStatus.NEW, nullable=False)
    assigned_to: Mapped[int | None] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"))
    # Free-text external tender reference, not a foreign key.
    tender_id: Mapped[str | None] = mapped_column(String(100))
    bid_start_date: Mapped[date | None] = mapped_column(Date)
    bid_end_date: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(Text)

    company = relationship("Company")

    @property
    def company_name(self) -> str | None:
        return self.company.name if self.company is not None else None
