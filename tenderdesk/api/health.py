"""Health endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tenderdesk.core.config import get_config
from tenderdesk.core.dependencies import get_db_session
from tenderdesk.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(db: Session = Depends(get_db_session)) -> HealthResponse:
    cfg = get_config()
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        database = "unavailable"
    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        service=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        database=database,
    )
