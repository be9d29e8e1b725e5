"""Activity feed response schemas."""

from __future__ import annotations

from datetime import datetime

from tenderdesk.models.enums import ActivityType
from tenderdesk.schemas.common import APIModel


class ActivityResponse(APIModel):
    id: int
    tender_id: int | None = None
    activity_type: ActivityType
    description: str
    user_id: int
    timestamp: datetime
    user_name: str | None = None
