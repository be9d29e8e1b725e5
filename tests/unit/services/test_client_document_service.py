from __future__ import annotations

from datetime import date

import pytest

from tenderdesk.core.exceptions import ConflictError, NotFoundError
from tenderdesk.services import ClientService, DocumentService, TenderService


def test_client_name_unique(db_session):
    service = ClientService(db=db_session)
    client = service.create_client({"name": "Port Trust"})
    with pytest.raises(ConflictError):
        service.create_client({"name": "Port Trust"})
    assert service.update_client(client.id, {"address": "Dock 4"}).address == "Dock 4"


def test_document_requires_existing_tender(db_session):
    with pytest.raises(NotFoundError):
        DocumentService(db=db_session).create_document(
            {"tender_id": 55, "filename": "a.pdf", "filesize": 1, "filetype": "pdf", "path": "a.pdf"}
        )


def test_document_uploader_defaults_to_actor(db_session):
    tender = TenderService(db=db_session).create_tender(
        {
            "reference_number": "DOC-1",
            "title": "Docs",
            "publish_date": date(2026, 1, 1),
            "due_date": date(2026, 1, 31),
            "description": "with documents",
        }
    )
    service = DocumentService(db=db_session)
    document = service.create_document(
        {"tender_id": tender.id, "filename": "boq.xlsx", "filesize": 2048, "filetype": "xlsx", "path": "t/boq.xlsx"},
        actor_id=1,
    )

    assert document.uploaded_by == 1
    assert [d.filename for d in service.list_for_tender(tender.id)] == ["boq.xlsx"]
    assert service.list_for_tender(9999) == []
    assert service.delete_document(document.id) is True
    assert service.delete_document(document.id) is False
