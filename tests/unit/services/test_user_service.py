from __future__ import annotations

import pytest

from tenderdesk.core.exceptions import ConflictError, ValidationError
from tenderdesk.core.security import verify_password
from tenderdesk.services import UserService


def _user(username: str, **overrides) -> dict:
    data = {"username": username, "password": "password1", "name": "Dana Scully"}
    data.update(overrides)
    return data


def test_password_is_stored_hashed(db_session):
    user = UserService(db=db_session).create_user(_user("dana"))
    assert user.password != "password1"
    assert verify_password("password1", user.password)
    assert user.status == "Active"
    assert user.role == "user"


def test_duplicate_username_rejected(db_session):
    service = UserService(db=db_session)
    service.create_user(_user("fox"))
    with pytest.raises(ConflictError, match="Username already exists"):
        service.create_user(_user("fox"))


def test_update_username_checks_other_users_only(db_session):
    service = UserService(db=db_session)
    walter = service.create_user(_user("walter"))
    service.create_user(_user("jeffrey"))

    assert service.update_user(walter.id, {"username": "walter", "department": "Bids"}).department == "Bids"
    with pytest.raises(ConflictError):
        service.update_user(walter.id, {"username": "jeffrey"})


def test_password_change_is_rehashed(db_session):
    service = UserService(db=db_session)
    user = service.create_user(_user("monica"))

    updated = service.update_user(user.id, {"password": "new-password"})
    assert verify_password("new-password", updated.password)
    assert not verify_password("password1", updated.password)


def test_unknown_role_rejected(db_session):
    with pytest.raises(ValidationError, match="Role 404"):
        UserService(db=db_session).create_user(_user("john", role_id=404))


def test_delete_user(db_session):
    service = UserService(db=db_session)
    user = service.create_user(_user("skinner"))
    assert service.delete_user(user.id) is True
    assert service.get_user(user.id) is None
    assert service.delete_user(user.id) is False
