"""Client service."""

from __future__ import annotations

from typing import Any

from tenderdesk.core.exceptions import ConflictError
from tenderdesk.models import Client
from tenderdesk.services.base_service import BaseService


class ClientService(BaseService):
    def get_client(self, client_id: int) -> Client | None:
        return self.db.query(Client).filter(Client.id == client_id).first()

    def list_clients(self) -> list[Client]:
        return self.db.query(Client).order_by(Client.name).all()

    def _ensure_name_free(self, name: str, exclude_id: int | None = None) -> None:
        existing = self.db.query(Client).filter(Client.name == name).first()
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Client name already exists")

    def create_client(self, data: dict[str, Any]) -> Client:
        self._ensure_name_free(data["name"])
        client = Client(**data)
        self.db.add(client)
        self.commit()
        self.db.refresh(client)
        return client

    def update_client(self, client_id: int, changes: dict[str, Any]) -> Client | None:
        client = self.get_client(client_id)
        if client is None:
            return None
        if changes.get("name") is not None:
            self._ensure_name_free(changes["name"], exclude_id=client_id)
        self.apply_changes(client, changes)
        self.commit()
        self.db.refresh(client)
        return client

    def delete_client(self, client_id: int) -> bool:
        client = self.get_client(client_id)
        if client is None:
            return False
        self.db.delete(client)
        self.commit()
        return True
