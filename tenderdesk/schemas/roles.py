"""Role request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tenderdesk.schemas.common import APIModel, UpdateModel


class RoleCreateRequest(APIModel):
    name: str = Field(min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


class RoleUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    name: str | None = Field(default=None, min_length=2, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


class RoleResponse(APIModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    users_count: int = 0
