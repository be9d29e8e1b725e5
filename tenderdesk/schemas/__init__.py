"""Pydantic schema package for API contracts."""

from tenderdesk.schemas.activities import ActivityResponse
from tenderdesk.schemas.clients import ClientCreateRequest, ClientResponse, ClientUpdateRequest
from tenderdesk.schemas.common import APIModel, ErrorEnvelope, HealthResponse
from tenderdesk.schemas.companies import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest
from tenderdesk.schemas.customers import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from tenderdesk.schemas.dashboard import DashboardStats
from tenderdesk.schemas.documents import DocumentCreateRequest, DocumentResponse
from tenderdesk.schemas.leads import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from tenderdesk.schemas.roles import RoleCreateRequest, RoleResponse, RoleUpdateRequest
from tenderdesk.schemas.tenders import (
    TenderCreateRequest,
    TenderDetailResponse,
    TenderPage,
    TenderResponse,
    TenderUpdateRequest,
)
from tenderdesk.schemas.users import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "APIModel",
    "ActivityResponse",
    "ClientCreateRequest",
    "ClientResponse",
    "ClientUpdateRequest",
    "CompanyCreateRequest",
    "CompanyResponse",
    "CompanyUpdateRequest",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerUpdateRequest",
    "DashboardStats",
    "DocumentCreateRequest",
    "DocumentResponse",
    "ErrorEnvelope",
    "HealthResponse",
    "LeadCreateRequest",
    "LeadResponse",
    "LeadUpdateRequest",
    "RoleCreateRequest",
    "RoleResponse",
    "RoleUpdateRequest",
    "TenderCreateRequest",
    "TenderDetailResponse",
    "TenderPage",
    "TenderResponse",
    "TenderUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
