"""Role model module."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenderdesk.models.base import Base, CreatedAtMixin


class Role(Base, CreatedAtMixin):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)

    users = relationship("User", back_populates="assigned_role", passive_deletes="all")
