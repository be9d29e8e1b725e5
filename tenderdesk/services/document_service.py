"""Document metadata service; file bytes live outside this application."""

from __future__ import annotations

from typing import Any

from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.models import Document, Tender
from tenderdesk.services.base_service import BaseService


class DocumentService(BaseService):
    def get_document(self, document_id: int) -> Document | None:
        return self.db.query(Document).filter(Document.id == document_id).first()

    def list_documents(self) -> list[Document]:
        return self.db.query(Document).order_by(Document.uploaded_at.desc(), Document.id.desc()).all()

    def list_for_tender(self, tender_id: int) -> list[Document]:
        return self.db.query(Document).filter(Document.tender_id == tender_id).order_by(Document.id).all()

    def create_document(self, data: dict[str, Any], actor_id: int | None = None) -> Document:
        payload = dict(data)
        if self.db.get(Tender, payload["tender_id"]) is None:
            raise NotFoundError(f"Tender {payload['tender_id']} does not exist")
        if payload.get("uploaded_by") is None:
            payload["uploaded_by"] = self.resolve_actor(actor_id)

        document = Document(**payload)
        self.db.add(document)
        self.commit()
        self.db.refresh(document)
        return document

    def delete_document(self, document_id: int) -> bool:
        document = self.get_document(document_id)
        if document is None:
            return False
        self.db.delete(document)
        self.commit()
        return True
