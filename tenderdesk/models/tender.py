"""Tender model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenderdesk.models.base import Base, TimestampMixin, enum_type
from tenderdesk.models.enums import TenderStatus


class Tender(Base, TimestampMixin):
    __tablename__ = "tenders"
    __table_args__ = (
        Index("idx_tenders_status", "status"),
        Index("idx_tenders_client", "client_id"),
        Index("idx_tenders_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    reference_number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    client_id: Mapped[int | None] = mapped_column(ForeignKey("clients.id", ondelete="RESTRICT"))
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id", ondelete="RESTRICT"))
    department: Mapped[str | None] = mapped_column(String(255))
    publish_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[TenderStatus] = mapped_column(enum_type(TenderStatus), default=TenderStatus.OPEN, nullable=False)
    estimated_value: Mapped[Decimal | None] = mapped_column(Numeric(16, 2))
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_by: Mapped[int | None] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"))

    client = relationship("Client")
    company = relationship("Company")
    documents = relationship(
        "Document",
        back_populates="tender",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Document.id",
    )
