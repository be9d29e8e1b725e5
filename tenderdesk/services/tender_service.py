"""Tender service: filtered/paginated listing and audited mutations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from tenderdesk.core.exceptions import ConflictError, ValidationError
from tenderdesk.models import ActivityType, Client, Company, Document, Tender, TenderStatus, User
from tenderdesk.services.activity_service import ActivityService
from tenderdesk.services.base_service import BaseService
from tenderdesk.services.filters import FilterSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenderFilters:
    status: TenderStatus | None = None
    client_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    search: str | None = None

    def to_filter_set(self) -> FilterSet:
        return (
            FilterSet()
            .equals(Tender.status, self.status)
            .equals(Tender.client_id, self.client_id)
            .between(Tender.publish_date, self.start_date, self.end_date)
            .contains((Tender.title, Tender.reference_number), self.search)
        )


@dataclass(frozen=True)
class TenderListResult:
    items: list[Tender]
    total: int
    page: int
    limit: int


def page_offset(page: int, limit: int) -> int:
    if page < 1 or limit < 1:
        raise ValidationError("page and limit must be >= 1")
    return (page - 1) * limit


class TenderService(BaseService):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.activities = ActivityService(db=self.db, settings=self.settings)

    def get_tender(self, tender_id: int) -> Tender | None:
        return self.db.query(Tender).filter(Tender.id == tender_id).first()

    def get_by_reference(self, reference_number: str) -> Tender | None:
        return self.db.query(Tender).filter(Tender.reference_number == reference_number).first()

    def list_tenders(self, filters: TenderFilters | None = None, page: int = 1, limit: int | None = None) -> TenderListResult:
        """Count-then-fetch over one conjunctive predicate, newest first."""
        limit = limit or self.settings.TENDER_PAGE_SIZE_DEFAULT
        offset = page_offset(page, limit)
        predicate = (filters or TenderFilters()).to_filter_set().clause()

        total = self.db.query(Tender).filter(predicate).count()
        items = (
            self.db.query(Tender)
            .filter(predicate)
            .order_by(Tender.created_at.desc(), Tender.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return TenderListResult(items=items, total=total, page=page, limit=limit)

    def _ensure_reference_free(self, reference_number: str, exclude_id: int | None = None) -> None:
        existing = self.get_by_reference(reference_number)
        if existing is None or existing.id == exclude_id:
            return
        if exclude_id is None:
            raise ConflictError("Reference number is already in use")
        raise ConflictError("Reference number is already in use by another tender")

    def _ensure_references_exist(self, data: dict[str, Any]) -> None:
        for field, model, label in (
            ("client_id", Client, "Client"),
            ("company_id", Company, "Company"),
            ("created_by", User, "User"),
        ):
            value = data.get(field)
            if value is not None and self.db.get(model, value) is None:
                raise ValidationError(f"{label} {value} does not exist")

    @staticmethod
    def _ensure_dates_ordered(publish_date: date, due_date: date) -> None:
        if due_date < publish_date:
            raise ValidationError("dueDate must be on or after publishDate")

    def create_tender(self, data: dict[str, Any], actor_id: int | None = None) -> Tender:
        payload = dict(data)
        if payload.get("created_by") is None:
            payload["created_by"] = actor_id
        self._ensure_dates_ordered(payload["publish_date"], payload["due_date"])
        self._ensure_reference_free(payload["reference_number"])
        self._ensure_references_exist(payload)

        tender = Tender(**payload)
        self.db.add(tender)
        self.db.flush()
        self.activities.record(
            ActivityType.CREATE_TENDER,
            f"New tender added: {tender.title}",
            actor_id if actor_id is not None else tender.created_by,
            tender_id=tender.id,
        )
        self.commit()
        self.db.refresh(tender)
        logger.info(
            "tender.created",
            extra={"event": "tender.created", "tender_id": tender.id, "reference_number": tender.reference_number},
        )
        return tender

    def update_tender(self, tender_id: int, changes: dict[str, Any], actor_id: int | None = None) -> Tender | None:
        tender = self.get_tender(tender_id)
        if tender is None:
            return None

        if changes.get("reference_number") is not None:
            self._ensure_reference_free(changes["reference_number"], exclude_id=tender_id)
        self._ensure_references_exist(changes)
        self._ensure_dates_ordered(
            changes.get("publish_date") or tender.publish_date,
            changes.get("due_date") or tender.due_date,
        )

        self.apply_changes(tender, changes)
        self.activities.record(
            ActivityType.UPDATE_TENDER,
            f"Tender updated: {tender.title}",
            actor_id,
            tender_id=tender.id,
        )
        self.commit()
        self.db.refresh(tender)
        logger.info("tender.updated", extra={"event": "tender.updated", "tender_id": tender.id})
        return tender

    def delete_tender(self, tender_id: int, actor_id: int | None = None) -> bool:
        """Delete a tender and its documents in one transaction."""
        tender = self.get_tender(tender_id)
        if tender is None:
            return False

        description = f"Tender deleted: {tender.title} ({tender.reference_number})"
        removed_documents = self.db.query(Document).filter(Document.tender_id == tender_id).count()
        # Loaded documents go through the ORM cascade, the rest through ON DELETE CASCADE.
        self.db.delete(tender)
        self.activities.record(ActivityType.DELETE_TENDER, description, actor_id)
        self.commit()
        logger.info(
            "tender.deleted",
            extra={"event": "tender.deleted", "tender_id": tender_id, "documents_removed": removed_documents},
        )
        return True
