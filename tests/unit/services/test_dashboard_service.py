from __future__ import annotations

from datetime import date

from tenderdesk.models import TenderStatus
from tenderdesk.services import DashboardService, TenderService


def test_counts_include_every_status(db_session):
    service = TenderService(db=db_session)
    for reference, status in (("S-1", TenderStatus.OPEN), ("S-2", TenderStatus.OPEN), ("S-3", TenderStatus.AWARDED)):
        service.create_tender(
            {
                "reference_number": reference,
                "title": reference,
                "publish_date": date(2026, 1, 1),
                "due_date": date(2026, 1, 2),
                "status": status,
                "description": "count me",
            }
        )

    counts = DashboardService(db=db_session).counts()

    assert counts["tenders"] == 3
    assert counts["tenders_by_status"] == {"open": 2, "pending": 0, "closed": 0, "awarded": 1}
    assert counts["users"] == 1
    assert counts["leads"] == 0
