"""Dashboard schema module."""

from __future__ import annotations

from tenderdesk.schemas.common import APIModel


class DashboardStats(APIModel):
    tenders: int
    tenders_by_status: dict[str, int]
    leads: int
    companies: int
    clients: int
    customers: int
    documents: int
    users: int
