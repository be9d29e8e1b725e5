"""FastAPI dependency wrappers shared by the route modules."""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status

from tenderdesk.core.config import Config
from tenderdesk.core.dependencies import CurrentActor, extract_bearer_token, get_current_actor, get_settings
from tenderdesk.core.exceptions import AuthenticationError, NotFoundError


def current_actor(
    authorization: str | None = Header(default=None),
    settings: Config = Depends(get_settings),
) -> CurrentActor:
    try:
        token = extract_bearer_token(authorization)
        return get_current_actor(token=token, settings=settings)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def clamp_limit(limit: int | None, default: int, maximum: int) -> int:
    if limit is None:
        return default
    return min(limit, maximum)


def require_found(instance, label: str):
    """Return ``instance`` or raise ``NotFoundError`` naming the resource."""
    if instance is None:
        raise NotFoundError(f"{label} not found")
    return instance
