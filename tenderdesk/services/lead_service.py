"""Lead service with company-joined listing and audited mutations."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import contains_eager, joinedload

from tenderdesk.core.exceptions import ValidationError
from tenderdesk.models import ActivityType, Company, Lead, LeadStatus, User
from tenderdesk.services.activity_service import ActivityService
from tenderdesk.services.base_service import BaseService
from tenderdesk.services.filters import FilterSet

logger = logging.getLogger(__name__)


class LeadService(BaseService):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.activities = ActivityService(db=self.db, settings=self.settings)

    def get_lead(self, lead_id: int) -> Lead | None:
        return self.db.query(Lead).options(joinedload(Lead.company)).filter(Lead.id == lead_id).first()

    def list_leads(
        self,
        status: LeadStatus | None = None,
        source: str | None = None,
        search: str | None = None,
    ) -> list[Lead]:
        filters = (
            FilterSet()
            .equals(Lead.status, status)
            .equals(Lead.source, source)
            .contains((Lead.title, Company.name, Lead.contact_person), search)
        )
        return (
            self.db.query(Lead)
            .outerjoin(Lead.company)
            .options(contains_eager(Lead.company))
            .filter(filters.clause())
            .order_by(Lead.created_at.desc(), Lead.id.desc())
            .all()
        )

    def _validate(self, data: dict[str, Any], current: Lead | None = None) -> None:
        company_id = data.get("company_id")
        if company_id is not None and self.db.get(Company, company_id) is None:
            raise ValidationError(f"Company {company_id} does not exist")
        assigned_to = data.get("assigned_to")
        if assigned_to is not None and self.db.get(User, assigned_to) is None:
            raise ValidationError(f"User {assigned_to} does not exist")

        start = data.get("bid_start_date", current.bid_start_date if current else None)
        end = data.get("bid_end_date", current.bid_end_date if current else None)
        if start is not None and end is not None and end < start:
            raise ValidationError("bidEndDate must be on or after bidStartDate")

    def create_lead(self, data: dict[str, Any], actor_id: int | None = None) -> Lead:
        payload = dict(data)
        payload.setdefault("emd_value", "0")
        payload.setdefault("status", LeadStatus.NEW)
        self._validate(payload)

        lead = Lead(**payload)
        self.db.add(lead)
        self.activities.record(
            ActivityType.CREATE_LEAD,
            f"New lead created: {lead.title}",
            actor_id if actor_id is not None else lead.assigned_to,
        )
        self.commit()
        logger.info("lead.created", extra={"event": "lead.created", "lead_id": lead.id})
        return self.get_lead(lead.id)

    def update_lead(self, lead_id: int, changes: dict[str, Any], actor_id: int | None = None) -> Lead | None:
        lead = self.get_lead(lead_id)
        if lead is None:
            return None
        self._validate(changes, current=lead)

        self.apply_changes(lead, changes)
        self.activities.record(
            ActivityType.UPDATE_LEAD,
            f"Lead updated: {lead.title}",
            actor_id if actor_id is not None else lead.assigned_to,
        )
        self.commit()
        self.db.expire(lead)
        return self.get_lead(lead_id)

    def delete_lead(self, lead_id: int, actor_id: int | None = None) -> bool:
        lead = self.get_lead(lead_id)
        if lead is None:
            return False
        title = lead.title
        fallback_actor = lead.assigned_to
        self.db.delete(lead)
        self.activities.record(
            ActivityType.DELETE_LEAD,
            f"Lead deleted: {title}",
            actor_id if actor_id is not None else fallback_actor,
        )
        self.commit()
        logger.info("lead.deleted", extra={"event": "lead.deleted", "lead_id": lead_id})
        return True
