"""Role service with the assigned-users deletion guard."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func

from tenderdesk.core.exceptions import ConflictError
from tenderdesk.models import Role, User
from tenderdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)


class RoleService(BaseService):
    def get_role(self, role_id: int) -> Role | None:
        return self.db.query(Role).filter(Role.id == role_id).first()

    def get_by_name(self, name: str) -> Role | None:
        return self.db.query(Role).filter(Role.name == name).first()

    def list_roles(self) -> list[Role]:
        return self.db.query(Role).order_by(Role.id).all()

    def count_users(self, role_id: int) -> int:
        return self.db.query(func.count(User.id)).filter(User.role_id == role_id).scalar() or 0

    def user_counts(self) -> dict[int, int]:
        """Users per role id, in one grouped query."""
        rows = (
            self.db.query(User.role_id, func.count(User.id))
            .filter(User.role_id.is_not(None))
            .group_by(User.role_id)
            .all()
        )
        return {role_id: count for role_id, count in rows}

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        existing = self.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Role name already exists")

    def create_role(self, data: dict[str, Any]) -> Role:
        self._ensure_name_free(data["name"])
        role = Role(**data)
        self.db.add(role)
        self.commit()
        self.db.refresh(role)
        logger.info("role.created", extra={"event": "role.created", "role_id": role.id})
        return role

    def update_role(self, role_id: int, changes: dict[str, Any]) -> Role | None:
        role = self.get_role(role_id)
        if role is None:
            return None
        if changes.get("name") is not None:
            self._ensure_name_free(changes["name"], exclude_id=role_id)
        self.apply_changes(role, changes)
        self.commit()
        self.db.refresh(role)
        return role

    def delete_role(self, role_id: int) -> bool:
        """Delete a role that no user references.

        The role row is locked for the count-then-delete sequence so a
        concurrent assignment cannot slip in between; the RESTRICT foreign key
        on ``users.role_id`` backs this up at the store level.
        """
        role = self.db.query(Role).filter(Role.id == role_id).with_for_update().first()
        if role is None:
            self.rollback()
            return False

        users_count = self.count_users(role_id)
        if users_count > 0:
            self.rollback()
            raise ConflictError(
                "Cannot delete role that has assigned users",
                details={"usersCount": users_count},
            )

        self.db.delete(role)
        self.commit()
        logger.info("role.deleted", extra={"event": "role.deleted", "role_id": role_id})
        return True
