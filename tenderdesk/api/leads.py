"""Lead routes; rows carry ``companyName`` from the joined company."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import current_actor, require_found
from tenderdesk.core.dependencies import CurrentActor, get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.models import LeadStatus
from tenderdesk.schemas import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from tenderdesk.services import LeadService

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("", response_model=list[LeadResponse])
def list_leads(
    status_filter: LeadStatus | None = Query(default=None, alias="status"),
    source: str | None = Query(default=None, max_length=100),
    search: str | None = Query(default=None, max_length=200),
    db: Session = Depends(get_db_session),
) -> list[LeadResponse]:
    leads = LeadService(db=db).list_leads(status=status_filter, source=source, search=search)
    return [LeadResponse.model_validate(lead) for lead in leads]


@router.get("/{lead_id}", response_model=LeadResponse)
def get_lead(lead_id: int, db: Session = Depends(get_db_session)) -> LeadResponse:
    return LeadResponse.model_validate(require_found(LeadService(db=db).get_lead(lead_id), "Lead"))


@router.post("", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
def create_lead(
    payload: LeadCreateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    lead = LeadService(db=db).create_lead(payload.model_dump(), actor_id=actor.user_id)
    return LeadResponse.model_validate(lead)


@router.api_route("/{lead_id}", methods=["PUT", "PATCH"], response_model=LeadResponse)
def update_lead(
    lead_id: int,
    payload: LeadUpdateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    lead = LeadService(db=db).update_lead(lead_id, payload.changes(), actor_id=actor.user_id)
    return LeadResponse.model_validate(require_found(lead, "Lead"))


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(
    lead_id: int,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> Response:
    if not LeadService(db=db).delete_lead(lead_id, actor_id=actor.user_id):
        raise NotFoundError("Lead not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
