"""SQLAlchemy model package for the TenderDesk schema."""

from tenderdesk.models.activity import Activity
from tenderdesk.models.base import Base
from tenderdesk.models.client import Client
from tenderdesk.models.company import Company
from tenderdesk.models.customer import Customer
from tenderdesk.models.document import Document
from tenderdesk.models.enums import ActivityType, LeadStatus, TenderStatus
from tenderdesk.models.lead import Lead
from tenderdesk.models.role import Role
from tenderdesk.models.tender import Tender
from tenderdesk.models.user import User

__all__ = [
    "Activity",
    "ActivityType",
    "Base",
    "Client",
    "Company",
    "Customer",
    "Document",
    "Lead",
    "LeadStatus",
    "Role",
    "Tender",
    "TenderStatus",
    "User",
]
