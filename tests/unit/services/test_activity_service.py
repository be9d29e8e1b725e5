from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tenderdesk.models import Activity, ActivityType, User
from tenderdesk.services import ActivityService


def _add(db_session, description: str, minutes: int, user_id: int = 1, tender_id: int | None = None) -> None:
    db_session.add(
        Activity(
            activity_type=ActivityType.CREATE_COMPANY,
            description=description,
            user_id=user_id,
            tender_id=tender_id,
            timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
        )
    )


def test_recent_is_newest_first_with_user_name(db_session):
    for minute in range(1, 8):
        _add(db_session, f"event {minute}", minute)
    db_session.commit()

    items = ActivityService(db=db_session).recent(limit=3)

    assert [item.description for item in items] == ["event 7", "event 6", "event 5"]
    assert all(item.user_name == "Admin User" for item in items)


def test_recent_defaults_to_five(db_session):
    for minute in range(10):
        _add(db_session, f"event {minute}", minute)
    db_session.commit()

    assert len(ActivityService(db=db_session).recent()) == 5


def test_equal_timestamps_fall_back_to_insertion_order(db_session):
    _add(db_session, "first", 1)
    db_session.flush()
    _add(db_session, "second", 1)
    db_session.commit()

    items = ActivityService(db=db_session).recent(limit=2)
    assert [item.description for item in items] == ["second", "first"]


def test_for_user_scopes_rows(db_session):
    db_session.add(User(id=2, username="eve", password="x", name="Eve"))
    db_session.commit()
    _add(db_session, "admin event", 1)
    _add(db_session, "eve event", 2, user_id=2)
    db_session.commit()

    items = ActivityService(db=db_session).for_user(2)
    assert [item.description for item in items] == ["eve event"]
    assert items[0].user_name == "Eve"


def test_record_joins_caller_transaction(db_session):
    service = ActivityService(db=db_session)
    service.record(ActivityType.UPDATE_CUSTOMER, "Customer updated: Acme", actor_id=None)
    db_session.rollback()

    assert service.recent() == []
