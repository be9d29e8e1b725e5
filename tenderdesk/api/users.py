"""User routes. Responses go through ``UserResponse``, which has no password."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import current_actor, require_found
from tenderdesk.core.dependencies import CurrentActor, get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.schemas import ActivityResponse, UserCreateRequest, UserResponse, UserUpdateRequest
from tenderdesk.services import ActivityService, UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db_session)) -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in UserService(db=db).list_users()]


@router.get("/current", response_model=UserResponse)
def current_user(
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> UserResponse:
    user = require_found(UserService(db=db).get_user(actor.user_id), "User")
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db_session)) -> UserResponse:
    return UserResponse.model_validate(require_found(UserService(db=db).get_user(user_id), "User"))


@router.get("/{user_id}/activities", response_model=list[ActivityResponse])
def user_activities(
    user_id: int,
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db_session),
) -> list[ActivityResponse]:
    require_found(UserService(db=db).get_user(user_id), "User")
    items = ActivityService(db=db).for_user(user_id, limit=limit)
    return [ActivityResponse.model_validate(item) for item in items]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreateRequest, db: Session = Depends(get_db_session)) -> UserResponse:
    user = UserService(db=db).create_user(payload.model_dump())
    return UserResponse.model_validate(user)


@router.api_route("/{user_id}", methods=["PUT", "PATCH"], response_model=UserResponse)
def update_user(user_id: int, payload: UserUpdateRequest, db: Session = Depends(get_db_session)) -> UserResponse:
    user = require_found(UserService(db=db).update_user(user_id, payload.changes()), "User")
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db_session)) -> Response:
    if not UserService(db=db).delete_user(user_id):
        raise NotFoundError("User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
