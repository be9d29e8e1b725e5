"""Tender routes: paginated listing, detail with documents, audited mutations."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import clamp_limit, current_actor, require_found
from tenderdesk.core.config import Config
from tenderdesk.core.dependencies import CurrentActor, get_db_session, get_settings
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.models import TenderStatus
from tenderdesk.schemas import (
    ActivityResponse,
    DocumentResponse,
    TenderCreateRequest,
    TenderDetailResponse,
    TenderPage,
    TenderResponse,
    TenderUpdateRequest,
)
from tenderdesk.services import ActivityService, DocumentService, TenderFilters, TenderService

router = APIRouter(prefix="/tenders", tags=["tenders"])


@router.get("", response_model=TenderPage)
def list_tenders(
    status_filter: TenderStatus | None = Query(default=None, alias="status"),
    client_id: int | None = Query(default=None, alias="clientId", ge=1),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    search: str | None = Query(default=None, max_length=200),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    settings: Config = Depends(get_settings),
    db: Session = Depends(get_db_session),
) -> TenderPage:
    filters = TenderFilters(
        status=status_filter,
        client_id=client_id,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    page_size = clamp_limit(limit, settings.TENDER_PAGE_SIZE_DEFAULT, settings.TENDER_PAGE_SIZE_MAX)
    result = TenderService(db=db, settings=settings).list_tenders(filters, page=page, limit=page_size)
    return TenderPage(
        items=[TenderResponse.model_validate(tender) for tender in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@router.get("/{tender_id}", response_model=TenderDetailResponse)
def get_tender(tender_id: int, db: Session = Depends(get_db_session)) -> TenderDetailResponse:
    tender = require_found(TenderService(db=db).get_tender(tender_id), "Tender")
    return TenderDetailResponse.model_validate(tender)


@router.get("/{tender_id}/documents", response_model=list[DocumentResponse])
def tender_documents(tender_id: int, db: Session = Depends(get_db_session)) -> list[DocumentResponse]:
    return [DocumentResponse.model_validate(document) for document in DocumentService(db=db).list_for_tender(tender_id)]


@router.get("/{tender_id}/activities", response_model=list[ActivityResponse])
def tender_activities(
    tender_id: int,
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db_session),
) -> list[ActivityResponse]:
    items = ActivityService(db=db).for_tender(tender_id, limit=limit)
    return [ActivityResponse.model_validate(item) for item in items]


@router.post("", response_model=TenderResponse, status_code=status.HTTP_201_CREATED)
def create_tender(
    payload: TenderCreateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> TenderResponse:
    tender = TenderService(db=db).create_tender(payload.model_dump(), actor_id=actor.user_id)
    return TenderResponse.model_validate(tender)


@router.api_route("/{tender_id}", methods=["PUT", "PATCH"], response_model=TenderResponse)
def update_tender(
    tender_id: int,
    payload: TenderUpdateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> TenderResponse:
    tender = TenderService(db=db).update_tender(tender_id, payload.changes(), actor_id=actor.user_id)
    return TenderResponse.model_validate(require_found(tender, "Tender"))


@router.delete("/{tender_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tender(
    tender_id: int,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> Response:
    if not TenderService(db=db).delete_tender(tender_id, actor_id=actor.user_id):
        raise NotFoundError("Tender not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
