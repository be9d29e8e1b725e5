"""Dependency providers for API handlers and scripts."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass

from sqlalchemy.orm import Session

from tenderdesk.auth.jwt import decode_jwt
from tenderdesk.core.config import Config, get_config
from tenderdesk.core.exceptions import AuthenticationError
from tenderdesk.database.db import get_db


@dataclass(frozen=True)
class CurrentActor:
    user_id: int
    authenticated: bool


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def extract_bearer_token(authorization: str | None) -> str | None:
    if authorization is None or not authorization.strip():
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise AuthenticationError("Authorization header must use Bearer token.")
    return parts[1].strip()


def get_current_actor(token: str | None = None, settings: Config | None = None) -> CurrentActor:
    """Resolve the acting user from a bearer token.

    Without a token the configured ``DEFAULT_ACTOR_ID`` acts; a token that is
    present but invalid is always rejected.
    """
    cfg = settings or get_settings()
    if token is None:
        return CurrentActor(user_id=cfg.DEFAULT_ACTOR_ID, authenticated=False)

    claims = decode_jwt(token=token, secret=cfg.SESSION_SECRET)
    try:
        return CurrentActor(user_id=int(claims["sub"]), authenticated=True)
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthenticationError("Invalid auth claims.") from exc
