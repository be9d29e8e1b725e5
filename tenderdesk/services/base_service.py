"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tenderdesk.core.config import Config, get_config
from tenderdesk.core.exceptions import ConflictError, DatabaseError
from tenderdesk.database.db import SessionLocal
from tenderdesk.models.base import utcnow

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None, settings: Config | None = None) -> None:
        self.db = db or SessionLocal()
        self.settings = settings or get_config()

    def commit(self) -> None:
        """Commit current transaction and rollback on failure.

        Store-level constraint violations surface as ``ConflictError``; any
        other store failure surfaces as ``DatabaseError``.
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(
                "database.integrity_violation",
                extra={"event": "database.integrity_violation", "detail": str(exc.orig)},
            )
            raise ConflictError("Operation violates a uniqueness or reference constraint.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("database.commit_failed", extra={"event": "database.commit_failed"})
            raise DatabaseError("Database operation failed.") from exc

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    def resolve_actor(self, actor_id: int | None) -> int:
        """Return the acting user id, falling back to the configured identity."""
        return actor_id if actor_id is not None else self.settings.DEFAULT_ACTOR_ID

    @staticmethod
    def apply_changes(instance: Any, changes: dict[str, Any]) -> None:
        """Merge supplied fields onto ``instance`` and refresh ``updated_at``."""
        for field, value in changes.items():
            setattr(instance, field, value)
        if hasattr(instance, "updated_at"):
            instance.updated_at = utcnow()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()
