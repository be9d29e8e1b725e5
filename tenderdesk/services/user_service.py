"""User service: CRUD with username uniqueness and password hashing."""

from __future__ import annotations

import logging
from typing import Any

from tenderdesk.core.exceptions import ConflictError, ValidationError
from tenderdesk.core.security import hash_password
from tenderdesk.models import Role, User
from tenderdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def _ensure_username_free(self, username: str, exclude_id: int | None = None) -> None:
        existing = self.get_by_username(username)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Username already exists")

    def _ensure_role_exists(self, role_id: int | None) -> None:
        if role_id is not None and self.db.get(Role, role_id) is None:
            raise ValidationError(f"Role {role_id} does not exist")

    def _hash(self, password: str) -> str:
        return hash_password(password, iterations=self.settings.PASSWORD_HASH_ITERATIONS)

    def create_user(self, data: dict[str, Any]) -> User:
        payload = dict(data)
        self._ensure_username_free(payload["username"])
        self._ensure_role_exists(payload.get("role_id"))
        payload["password"] = self._hash(payload["password"])

        user = User(**payload)
        self.db.add(user)
        self.commit()
        self.db.refresh(user)
        logger.info("user.created", extra={"event": "user.created", "user_id": user.id})
        return user

    def update_user(self, user_id: int, changes: dict[str, Any]) -> User | None:
        user = self.get_user(user_id)
        if user is None:
            return None

        changes = dict(changes)
        if changes.get("username") is not None:
            self._ensure_username_free(changes["username"], exclude_id=user_id)
        if "role_id" in changes:
            self._ensure_role_exists(changes["role_id"])
        if changes.get("password"):
            changes["password"] = self._hash(changes["password"])
        else:
            changes.pop("password", None)

        self.apply_changes(user, changes)
        self.commit()
        self.db.refresh(user)
        logger.info("user.updated", extra={"event": "user.updated", "user_id": user.id})
        return user

    def delete_user(self, user_id: int) -> bool:
        user = self.get_user(user_id)
        if user is None:
            return False
        self.db.delete(user)
        self.commit()
        logger.info("user.deleted", extra={"event": "user.deleted", "user_id": user_id})
        return True
