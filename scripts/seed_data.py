"""Seed roles, the admin account (the default actor) and sample records."""

import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from tenderdesk.core.logging_config import configure_logging
from tenderdesk.database.db import SessionLocal, create_schema
from tenderdesk.models import LeadStatus, TenderStatus
from tenderdesk.services import (
    ClientService,
    CompanyService,
    CustomerService,
    DocumentService,
    LeadService,
    RoleService,
    TenderService,
    UserService,
)

ROLES = (
    ("Admin", "Full access to every module"),
    ("Manager", "Manages tenders, leads and companies"),
    ("User", "Day-to-day data entry"),
)


def seed_roles(db) -> dict[str, int]:
    service = RoleService(db=db)
    role_ids = {}
    for name, description in ROLES:
        role = service.get_by_name(name) or service.create_role({"name": name, "description": description})
        role_ids[name] = role.id
    return role_ids


def seed_admin(db, role_id: int) -> int:
    service = UserService(db=db)
    admin = service.get_by_username("admin")
    if admin is None:
        admin = service.create_user(
            {
                "username": "admin",
                "password": "admin123",
                "name": "Administrator",
                "email": "admin@tenderdesk.local",
                "role": "admin",
                "role_id": role_id,
                "department": "Operations",
            }
        )
        print(f"Seeded admin user (id={admin.id}).")
    return admin.id


def seed_samples(db, actor_id: int) -> None:
    tenders = TenderService(db=db)
    if tenders.get_by_reference("TDR-2026-001") is not None:
        print("Sample records already exist.")
        return

    client = ClientService(db=db).create_client(
        {"name": "Public Works Department", "contact_person": "R. Mehta", "email": "pwd@example.gov"}
    )
    company = CompanyService(db=db).create_company(
        {
            "name": "ABC Infrastructure Pvt Ltd",
            "cin": "U45200MH2010PTC123456",
            "gst": "27AABCA1234F1Z5",
            "contact_person": "Anita Rao",
            "location": "Mumbai",
            "pincode": "400001",
        },
        actor_id=actor_id,
    )
    CustomerService(db=db).create_customer(
        {"name": "Vikram Shah", "company": "Metro Rail Corp", "email": "vikram@example.com", "type": "Government"},
        actor_id=actor_id,
    )
    today = date.today()
    tender = tenders.create_tender(
        {
            "reference_number": "TDR-2026-001",
            "title": "Road resurfacing, ward 12",
            "client_id": client.id,
            "company_id": company.id,
            "department": "Civil",
            "publish_date": today,
            "due_date": today + timedelta(days=30),
            "status": TenderStatus.OPEN,
            "estimated_value": Decimal("2500000.00"),
            "description": "Resurfacing of 4.2 km arterial road including drainage works.",
        },
        actor_id=actor_id,
    )
    DocumentService(db=db).create_document(
        {
            "tender_id": tender.id,
            "filename": "nit.pdf",
            "filesize": 184320,
            "filetype": "application/pdf",
            "path": "tenders/TDR-2026-001/nit.pdf",
        },
        actor_id=actor_id,
    )
    LeadService(db=db).create_lead(
        {
            "title": "Bridge maintenance contract",
            "company_id": company.id,
            "contact_person": "Anita Rao",
            "source": "GeM Portal",
            "emd_value": "50000",
            "status": LeadStatus.CONTACTED,
            "assigned_to": actor_id,
            "bid_start_date": today,
            "bid_end_date": today + timedelta(days=14),
        },
        actor_id=actor_id,
    )
    print(f"Seeded sample tender {tender.reference_number} with client, company, customer, document and lead.")


def seed() -> None:
    configure_logging()
    create_schema()
    db = SessionLocal()
    try:
        role_ids = seed_roles(db)
        admin_id = seed_admin(db, role_ids["Admin"])
        seed_samples(db, admin_id)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
