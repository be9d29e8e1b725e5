"""Company request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tenderdesk.schemas.common import APIModel, UpdateModel


class CompanyCreateRequest(APIModel):
    name: str = Field(min_length=2, max_length=255)
    cin: str | None = Field(default=None, max_length=50)
    pan: str | None = Field(default=None, max_length=50)
    gst: str | None = Field(default=None, max_length=50)
    contact_person: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=255)
    pincode: str | None = Field(default=None, max_length=20)
    status: str = Field(default="Active", min_length=1, max_length=40)


class CompanyUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name", "status"})

    name: str | None = Field(default=None, min_length=2, max_length=255)
    cin: str | None = Field(default=None, max_length=50)
    pan: str | None = Field(default=None, max_length=50)
    gst: str | None = Field(default=None, max_length=50)
    contact_person: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=255)
    pincode: str | None = Field(default=None, max_length=20)
    status: str | None = Field(default=None, min_length=1, max_length=40)


class CompanyResponse(APIModel):
    id: int
    name: str
    cin: str | None = None
    pan: str | None = None
    gst: str | None = None
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    pincode: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
