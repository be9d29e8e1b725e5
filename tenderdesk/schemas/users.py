"""User request/response schemas.

``UserResponse`` has no password field, so every endpoint that serializes a
user through it is redacted by construction.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from tenderdesk.schemas.common import APIModel, UpdateModel


class UserCreateRequest(APIModel):
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=6, max_length=256)
    name: str = Field(min_length=2, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    role: str = Field(default="user", min_length=1, max_length=100)
    role_id: int | None = Field(default=None, ge=1)
    department: str | None = Field(default=None, max_length=255)
    status: str = Field(default="Active", min_length=1, max_length=40)


class UserUpdateRequest(UpdateModel):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"username", "password", "name", "role", "status"})

    username: str | None = Field(default=None, min_length=3, max_length=150)
    password: str | None = Field(default=None, min_length=6, max_length=256)
    name: str | None = Field(default=None, min_length=2, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    role: str | None = Field(default=None, min_length=1, max_length=100)
    role_id: int | None = Field(default=None, ge=1)
    department: str | None = Field(default=None, max_length=255)
    status: str | None = Field(default=None, min_length=1, max_length=40)


class UserResponse(APIModel):
    id: int
    username: str
    name: str
    email: str | None = None
    role: str
    role_id: int | None = None
    department: str | None = None
    status: str
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
