from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tenderdesk.core.dependencies import get_db_session
from tenderdesk.schemas import DashboardStats
from tenderdesk.services import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(db: Session = Depends(get_db_session)) -> DashboardStats:
    return DashboardStats(**DashboardService(db=db).counts())
