"""Persistence services, one per entity."""

from tenderdesk.services.activity_service import ActivityFeedItem, ActivityService
from tenderdesk.services.client_service import ClientService
from tenderdesk.services.company_service import CompanyService
from tenderdesk.services.customer_service import CustomerService
from tenderdesk.services.dashboard_service import DashboardService
from tenderdesk.services.document_service import DocumentService
from tenderdesk.services.lead_service import LeadService
from tenderdesk.services.role_service import RoleService
from tenderdesk.services.tender_service import TenderFilters, TenderListResult, TenderService
from tenderdesk.services.user_service import UserService

__all__ = [
    "ActivityFeedItem",
    "ActivityService",
    "ClientService",
    "CompanyService",
    "CustomerService",
    "DashboardService",
    "DocumentService",
    "LeadService",
    "RoleService",
    "TenderFilters",
    "TenderListResult",
    "TenderService",
    "UserService",
]
