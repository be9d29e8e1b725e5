"""Customer request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tenderdesk.schemas.common import APIModel, UpdateModel


class CustomerCreateRequest(APIModel):
    name: str = Field(min_length=1, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    type: str | None = Field(default=None, max_length=100)
    status: str = Field(default="Active", min_length=1, max_length=40)
    last_contact: datetime | None = None


class CustomerUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name", "status"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    type: str | None = Field(default=None, max_length=100)
    status: str | None = Field(default=None, min_length=1, max_length=40)
    last_contact: datetime | None = None


class CustomerResponse(APIModel):
    id: int
    name: str
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    type: str | None = None
    status: str
    last_contact: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
