"""Customer routes with status/type/search filtering."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import current_actor, require_found
from tenderdesk.core.dependencies import CurrentActor, get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.schemas import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from tenderdesk.services import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers(
    status_filter: str | None = Query(default=None, alias="status", max_length=40),
    customer_type: str | None = Query(default=None, alias="type", max_length=100),
    search: str | None = Query(default=None, max_length=200),
    db: Session = Depends(get_db_session),
) -> list[CustomerResponse]:
    customers = CustomerService(db=db).list_customers(status=status_filter, customer_type=customer_type, search=search)
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db_session)) -> CustomerResponse:
    return CustomerResponse.model_validate(require_found(CustomerService(db=db).get_customer(customer_id), "Customer"))


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> CustomerResponse:
    customer = CustomerService(db=db).create_customer(payload.model_dump(), actor_id=actor.user_id)
    return CustomerResponse.model_validate(customer)


@router.api_route("/{customer_id}", methods=["PUT", "PATCH"], response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    payload: CustomerUpdateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> CustomerResponse:
    customer = CustomerService(db=db).update_customer(customer_id, payload.changes(), actor_id=actor.user_id)
    return CustomerResponse.model_validate(require_found(customer, "Customer"))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> Response:
    if not CustomerService(db=db).delete_customer(customer_id, actor_id=actor.user_id):
        raise NotFoundError("Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
