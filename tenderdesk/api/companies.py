"""Company routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import current_actor, require_found
from tenderdesk.core.dependencies import CurrentActor, get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.schemas import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest
from tenderdesk.services import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
def list_companies(db: Session = Depends(get_db_session)) -> list[CompanyResponse]:
    return [CompanyResponse.model_validate(company) for company in CompanyService(db=db).list_companies()]


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: int, db: Session = Depends(get_db_session)) -> CompanyResponse:
    return CompanyResponse.model_validate(require_found(CompanyService(db=db).get_company(company_id), "Company"))


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> CompanyResponse:
    company = CompanyService(db=db).create_company(payload.model_dump(), actor_id=actor.user_id)
    return CompanyResponse.model_validate(company)


@router.api_route("/{company_id}", methods=["PUT", "PATCH"], response_model=CompanyResponse)
def update_company(
    company_id: int,
    payload: CompanyUpdateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> CompanyResponse:
    company = CompanyService(db=db).update_company(company_id, payload.changes(), actor_id=actor.user_id)
    return CompanyResponse.model_validate(require_found(company, "Company"))


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(
    company_id: int,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> Response:
    if not CompanyService(db=db).delete_company(company_id, actor_id=actor.user_id):
        raise NotFoundError("Company not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
