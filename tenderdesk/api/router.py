"""Root API router."""

from __future__ import annotations

from fastapi import APIRouter

from tenderdesk.api import (
    activities,
    clients,
    companies,
    customers,
    dashboard,
    documents,
    health,
    leads,
    roles,
    tenders,
    users,
)
from tenderdesk.core.config import get_config
from tenderdesk.schemas.common import ErrorEnvelope

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorEnvelope, "description": "Invalid request"},
    404: {"model": ErrorEnvelope, "description": "Resource not found"},
    500: {"model": ErrorEnvelope, "description": "Internal server error"},
}

api_router = APIRouter(prefix=get_config().API_PREFIX, responses=ERROR_RESPONSES)
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(roles.router)
api_router.include_router(companies.router)
api_router.include_router(clients.router)
api_router.include_router(customers.router)
api_router.include_router(tenders.router)
api_router.include_router(documents.router)
api_router.include_router(activities.router)
api_router.include_router(leads.router)
api_router.include_router(dashboard.router)


def get_api_router() -> APIRouter:
    return api_router
