"""Document request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from tenderdesk.schemas.common import APIModel

# Upper bound of the 32-bit integer column.
MAX_FILESIZE = 2_147_483_647


class DocumentCreateRequest(APIModel):
    tender_id: int = Field(ge=1)
    filename: str = Field(min_length=1, max_length=255)
    filesize: int = Field(ge=0, le=MAX_FILESIZE)
    filetype: str = Field(min_length=1, max_length=100)
    path: str = Field(min_length=1, max_length=1024)
    uploaded_by: int | None = Field(default=None, ge=1)


class DocumentResponse(APIModel):
    id: int
    tender_id: int
    filename: str
    filesize: int
    filetype: str
    path: str
    uploaded_by: int | None = None
    uploaded_at: datetime | None = None
