"""Dashboard counts."""

from __future__ import annotations

from sqlalchemy import func

from tenderdesk.models import Client, Company, Customer, Document, Lead, Tender, TenderStatus, User
from tenderdesk.services.base_service import BaseService


class DashboardService(BaseService):
    def _count(self, model) -> int:
        return self.db.query(func.count(model.id)).scalar() or 0

    def tender_counts_by_status(self) -> dict[str, int]:
        counts = {status.value: 0 for status in TenderStatus}
        rows = self.db.query(Tender.status, func.count(Tender.id)).group_by(Tender.status).all()
        for status, count in rows:
            counts[TenderStatus(status).value] = count
        return counts

    def counts(self) -> dict:
        by_status = self.tender_counts_by_status()
        return {
            "tenders": sum(by_status.values()),
            "tenders_by_status": by_status,
            "leads": self._count(Lead),
            "companies": self._count(Company),
            "clients": self._count(Client),
            "customers": self._count(Customer),
            "documents": self._count(Document),
            "users": self._count(User),
        }
