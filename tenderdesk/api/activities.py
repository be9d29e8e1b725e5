"""Recent-activity feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tenderdesk.api.deps import clamp_limit
from tenderdesk.core.config import Config
from tenderdesk.core.dependencies import get_db_session, get_settings
from tenderdesk.schemas import ActivityResponse
from tenderdesk.services import ActivityService

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/recent", response_model=list[ActivityResponse])
def recent_activities(
    limit: int | None = Query(default=None, ge=1),
    settings: Config = Depends(get_settings),
    db: Session = Depends(get_db_session),
) -> list[ActivityResponse]:
    size = clamp_limit(limit, settings.ACTIVITY_FEED_DEFAULT_LIMIT, settings.ACTIVITY_FEED_MAX_LIMIT)
    items = ActivityService(db=db, settings=settings).recent(limit=size)
    return [ActivityResponse.model_validate(item) for item in items]
