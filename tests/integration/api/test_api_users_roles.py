from __future__ import annotations

from tenderdesk.auth.jwt import create_access_token
from tenderdesk.core.config import get_config


def _create_user(client, username: str, **extra) -> dict:
    payload = {"username": username, "password": "hunter22", "name": f"{username.title()} Doe"}
    payload.update(extra)
    response = client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_user_responses_never_include_password(client):
    created = _create_user(client, "jdoe", email="jdoe@example.com")
    assert "password" not in created
    assert created["username"] == "jdoe"
    assert created["status"] == "Active"

    for path in ("/api/users", f"/api/users/{created['id']}", "/api/users/current"):
        response = client.get(path)
        assert response.status_code == 200
        payload = response.json()
        rows = payload if isinstance(payload, list) else [payload]
        assert rows
        assert all("password" not in row for row in rows)

    updated = client.patch(f"/api/users/{created['id']}", json={"password": "changed123", "department": "Bids"})
    assert updated.status_code == 200
    assert "password" not in updated.json()
    assert updated.json()["department"] == "Bids"


def test_duplicate_username_is_rejected(client):
    _create_user(client, "kim")
    response = client.post("/api/users", json={"username": "kim", "password": "hunter22", "name": "Kim Again"})
    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}


def test_current_user_defaults_to_fallback_actor(client):
    response = client.get("/api/users/current")
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert response.json()["username"] == "admin"


def test_current_user_from_bearer_token(client):
    created = _create_user(client, "lee")
    token = create_access_token(user_id=created["id"], secret=get_config().SESSION_SECRET)

    response = client.get("/api/users/current", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "lee"


def test_invalid_bearer_token_is_unauthorized(client):
    response = client.get("/api/users/current", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token format."}


def test_missing_user_returns_404(client):
    assert client.get("/api/users/999").status_code == 404
    assert client.put("/api/users/999", json={"name": "Nobody"}).status_code == 404
    assert client.delete("/api/users/999").status_code == 404


def test_role_delete_guard_reports_user_count(client):
    role = client.post("/api/roles", json={"name": "Estimator", "description": "Prices bids"})
    assert role.status_code == 201
    role_id = role.json()["id"]
    _create_user(client, "ann", roleId=role_id)
    _create_user(client, "ben", roleId=role_id)

    listed = {row["id"]: row for row in client.get("/api/roles").json()}
    assert listed[role_id]["usersCount"] == 2

    response = client.delete(f"/api/roles/{role_id}")
    assert response.status_code == 400
    assert response.json() == {"message": "Cannot delete role that has assigned users", "usersCount": 2}
    assert client.get(f"/api/roles/{role_id}").status_code == 200


def test_unassigned_role_can_be_deleted(client):
    role_id = client.post("/api/roles", json={"name": "Auditor"}).json()["id"]

    renamed = client.put(f"/api/roles/{role_id}", json={"description": "Read-only reviewer"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Auditor"
    assert renamed.json()["usersCount"] == 0

    assert client.delete(f"/api/roles/{role_id}").status_code == 204
    assert client.get(f"/api/roles/{role_id}").status_code == 404
    assert client.delete(f"/api/roles/{role_id}").status_code == 404
