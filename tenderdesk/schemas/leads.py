"""Lead request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from pydantic import Field, field_validator

from tenderdesk.models.enums import LeadStatus
from tenderdesk.schemas.common import APIModel, UpdateModel


def _normalize_emd(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return "0"
    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError("emdValue must be numeric") from exc
    if not amount.is_finite():
        raise ValueError("emdValue must be a finite number")
    if amount < 0:
        raise ValueError("emdValue must not be negative")
    return text


class LeadCreateRequest(APIModel):
    title: str = Field(min_length=2, max_length=500)
    company_id: int = Field(ge=1)
    contact_person: str | None = Field(default=None, max_length=255)
    source: str | None = Field(default=None, max_length=100)
    emd_value: str = Field(default="0", max_length=50)
    status: LeadStatus = LeadStatus.NEW
    assigned_to: int | None = Field(default=None, ge=1)
    tender_id: str | None = Field(default=None, max_length=100)
    bid_start_date: date | None = None
    bid_end_date: date | None = None
    notes: str | None = Field(default=None, max_length=20000)

    @field_validator("emd_value", mode="before")
    @classmethod
    def emd_value_is_numeric(cls, value: object) -> str:
        return _normalize_emd(value) or "0"


class LeadUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"title", "company_id", "emd_value", "status"})

    title: str | None = Field(default=None, min_length=2, max_length=500)
    company_id: int | None = Field(default=None, ge=1)
    contact_person: str | None = Field(default=None, max_length=255)
    source: str | None = Field(default=None, max_length=100)
    emd_value: str | None = Field(default=None, max_length=50)
    status: LeadStatus | None = None
    assigned_to: int | None = Field(default=None, ge=1)
    tender_id: str | None = Field(default=None, max_length=100)
    bid_start_date: date | None = None
    bid_end_date: date | None = None
    notes: str | None = Field(default=None, max_length=20000)

    @field_validator("emd_value", mode="before")
    @classmethod
    def emd_value_is_numeric(cls, value: object) -> str | None:
        return _normalize_emd(value)


class LeadResponse(APIModel):
    id: int
    title: str
    company_id: int
    company_name: str | None = None
    contact_person: str | None = None
    source: str | None = None
    emd_value: str
    status: LeadStatus
    assigned_to: int | None = None
    tender_id: str | None = None
    bid_start_date: date | None = None
    bid_end_date: date | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
