"""Tender request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from tenderdesk.models.enums import TenderStatus
from tenderdesk.schemas.common import APIModel, UpdateModel
from tenderdesk.schemas.documents import DocumentResponse


class TenderCreateRequest(APIModel):
    reference_number: str = Field(min_length=1, max_length=20)
    title: str = Field(min_length=1, max_length=500)
    client_id: int | None = Field(default=None, ge=1)
    company_id: int | None = Field(default=None, ge=1)
    department: str | None = Field(default=None, max_length=255)
    publish_date: date
    due_date: date
    status: TenderStatus = TenderStatus.OPEN
    estimated_value: Decimal | None = Field(default=None, ge=0, max_digits=16, decimal_places=2)
    description: str = Field(min_length=1, max_length=20000)
    created_by: int | None = Field(default=None, ge=1)


class TenderUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"reference_number", "title", "publish_date", "due_date", "status", "description"})

    reference_number: str | None = Field(default=None, min_length=1, max_length=20)
    title: str | None = Field(default=None, min_length=1, max_length=500)
    client_id: int | None = Field(default=None, ge=1)
    company_id: int | None = Field(default=None, ge=1)
    department: str | None = Field(default=None, max_length=255)
    publish_date: date | None = None
    due_date: date | None = None
    status: TenderStatus | None = None
    estimated_value: Decimal | None = Field(default=None, ge=0, max_digits=16, decimal_places=2)
    description: str | None = Field(default=None, min_length=1, max_length=20000)


class TenderResponse(APIModel):
    id: int
    reference_number: str
    title: str
    client_id: int | None = None
    company_id: int | None = None
    department: str | None = None
    publish_date: date
    due_date: date
    status: TenderStatus
    estimated_value: Decimal | None = None
    description: str
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TenderDetailResponse(TenderResponse):
    documents: list[DocumentResponse] = Field(default_factory=list)


class TenderPage(APIModel):
    items: list[TenderResponse]
    total: int
    page: int
    limit: int
