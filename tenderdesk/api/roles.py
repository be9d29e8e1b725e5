"""Role routes; list and detail responses carry ``usersCount``."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import require_found
from tenderdesk.core.dependencies import get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.models import Role
from tenderdesk.schemas import RoleCreateRequest, RoleResponse, RoleUpdateRequest
from tenderdesk.services import RoleService

router = APIRouter(prefix="/roles", tags=["roles"])


def _to_response(role: Role, users_count: int) -> RoleResponse:
    return RoleResponse.model_validate(role).model_copy(update={"users_count": users_count})


@router.get("", response_model=list[RoleResponse])
def list_roles(db: Session = Depends(get_db_session)) -> list[RoleResponse]:
    service = RoleService(db=db)
    counts = service.user_counts()
    return [_to_response(role, counts.get(role.id, 0)) for role in service.list_roles()]


@router.get("/{role_id}", response_model=RoleResponse)
def get_role(role_id: int, db: Session = Depends(get_db_session)) -> RoleResponse:
    service = RoleService(db=db)
    role = require_found(service.get_role(role_id), "Role")
    return _to_response(role, service.count_users(role_id))


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(payload: RoleCreateRequest, db: Session = Depends(get_db_session)) -> RoleResponse:
    return _to_response(RoleService(db=db).create_role(payload.model_dump()), 0)


@router.api_route("/{role_id}", methods=["PUT", "PATCH"], response_model=RoleResponse)
def update_role(role_id: int, payload: RoleUpdateRequest, db: Session = Depends(get_db_session)) -> RoleResponse:
    service = RoleService(db=db)
    role = require_found(service.update_role(role_id, payload.changes()), "Role")
    return _to_response(role, service.count_users(role_id))


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(role_id: int, db: Session = Depends(get_db_session)) -> Response:
    # A role still held by users raises ConflictError carrying usersCount.
    if not RoleService(db=db).delete_role(role_id):
        raise NotFoundError("Role not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
