from __future__ import annotations

import os
import uuid
from pathlib import Path

TMP_ROOT = Path(".test_tmp")
TMP_ROOT.mkdir(exist_ok=True)
os.environ.setdefault("DATABASE_URL", f"sqlite:///{TMP_ROOT / 'tenderdesk_default.db'}")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tenderdesk.core.dependencies import get_db_session  # noqa: E402
from tenderdesk.core.security import hash_password  # noqa: E402
from tenderdesk.database.db import build_engine, build_session_factory  # noqa: E402
from tenderdesk.main import app  # noqa: E402
from tenderdesk.models import Base, User  # noqa: E402

ADMIN_NAME = "Admin User"


def seed_default_actor(session) -> User:
    """User 1 is the fallback actor for activity rows."""
    admin = User(
        id=1,
        username="admin",
        password=hash_password("admin123", iterations=1000),
        name=ADMIN_NAME,
        role="admin",
    )
    session.add(admin)
    session.commit()
    return admin


@pytest.fixture
def session_factory():
    db_path = TMP_ROOT / f"tenderdesk_test_{uuid.uuid4().hex}.db"
    engine = build_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(bind=engine)
    factory = build_session_factory(engine)
    with factory() as session:
        seed_default_actor(session)
    yield factory
    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _override_db_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = _override_db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
