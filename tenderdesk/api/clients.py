"""Client (tendering authority) routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import require_found
from tenderdesk.core.dependencies import get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.schemas import ClientCreateRequest, ClientResponse, ClientUpdateRequest
from tenderdesk.services import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[ClientResponse])
def list_clients(db: Session = Depends(get_db_session)) -> list[ClientResponse]:
    return [ClientResponse.model_validate(client) for client in ClientService(db=db).list_clients()]


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Session = Depends(get_db_session)) -> ClientResponse:
    return ClientResponse.model_validate(require_found(ClientService(db=db).get_client(client_id), "Client"))


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(payload: ClientCreateRequest, db: Session = Depends(get_db_session)) -> ClientResponse:
    return ClientResponse.model_validate(ClientService(db=db).create_client(payload.model_dump()))


@router.api_route("/{client_id}", methods=["PUT", "PATCH"], response_model=ClientResponse)
def update_client(client_id: int, payload: ClientUpdateRequest, db: Session = Depends(get_db_session)) -> ClientResponse:
    client = ClientService(db=db).update_client(client_id, payload.changes())
    return ClientResponse.model_validate(require_found(client, "Client"))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: int, db: Session = Depends(get_db_session)) -> Response:
    if not ClientService(db=db).delete_client(client_id):
        raise NotFoundError("Client not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
