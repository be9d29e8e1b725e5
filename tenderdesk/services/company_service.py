"""Company service; every mutation writes one activity row."""

from __future__ import annotations

import logging
from typing import Any

from tenderdesk.models import ActivityType, Company
from tenderdesk.services.activity_service import ActivityService
from tenderdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)


class CompanyService(BaseService):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.activities = ActivityService(db=self.db, settings=self.settings)

    def get_company(self, company_id: int) -> Company | None:
        return self.db.query(Company).filter(Company.id == company_id).first()

    def list_companies(self) -> list[Company]:
        return self.db.query(Company).order_by(Company.created_at.desc(), Company.id.desc()).all()

    def create_company(self, data: dict[str, Any], actor_id: int | None = None) -> Company:
        company = Company(**data)
        self.db.add(company)
        self.activities.record(ActivityType.CREATE_COMPANY, f"New company added: {company.name}", actor_id)
        self.commit()
        self.db.refresh(company)
        logger.info("company.created", extra={"event": "company.created", "company_id": company.id})
        return company

    def update_company(self, company_id: int, changes: dict[str, Any], actor_id: int | None = None) -> Company | None:
        company = self.get_company(company_id)
        if company is None:
            return None
        self.apply_changes(company, changes)
        self.activities.record(ActivityType.UPDATE_COMPANY, f"Company updated: {company.name}", actor_id)
        self.commit()
        self.db.refresh(company)
        return company

    def delete_company(self, company_id: int, actor_id: int | None = None) -> bool:
        company = self.get_company(company_id)
        if company is None:
            return False
        name = company.name
        self.db.delete(company)
        self.activities.record(ActivityType.DELETE_COMPANY, f"Company deleted: {name}", actor_id)
        self.commit()
        logger.info("company.deleted", extra={"event": "company.deleted", "company_id": company_id})
        return True
