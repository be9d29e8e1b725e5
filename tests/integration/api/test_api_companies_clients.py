from __future__ import annotations

from datetime import datetime, timezone

from tenderdesk.models import Company


def test_company_partial_update_refreshes_updated_at(client, session_factory):
    created = client.post("/api/companies", json={"name": "Globex", "location": "Pune", "gst": "27AAAAA0000A1Z5"})
    assert created.status_code == 201
    company = created.json()
    with session_factory() as session:
        session.get(Company, company["id"]).updated_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
        session.commit()

    response = client.patch(f"/api/companies/{company['id']}", json={"phone": "020-5550100", "name": None})

    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "020-5550100"
    assert body["name"] == "Globex"
    assert body["location"] == "Pune"
    assert not body["updatedAt"].startswith("2020")


def test_company_crud_and_404(client):
    company_id = client.post("/api/companies", json={"name": "Umbrella"}).json()["id"]

    assert client.get(f"/api/companies/{company_id}").json()["status"] == "Active"
    assert [row["name"] for row in client.get("/api/companies").json()] == ["Umbrella"]
    assert client.delete(f"/api/companies/{company_id}").status_code == 204
    assert client.get(f"/api/companies/{company_id}").status_code == 404
    assert client.put(f"/api/companies/{company_id}", json={"name": "Gone"}).status_code == 404


def test_company_with_leads_cannot_be_deleted(client):
    company_id = client.post("/api/companies", json={"name": "Hooli"}).json()["id"]
    client.post("/api/leads", json={"title": "Campus", "companyId": company_id})

    response = client.delete(f"/api/companies/{company_id}")
    assert response.status_code == 400
    assert client.get(f"/api/companies/{company_id}").status_code == 200


def test_client_crud_and_unique_name(client):
    created = client.post("/api/clients", json={"name": "Port Trust", "contactPerson": "S. Iyer"})
    assert created.status_code == 201
    client_id = created.json()["id"]
    assert created.json()["contactPerson"] == "S. Iyer"

    duplicate = client.post("/api/clients", json={"name": "Port Trust"})
    assert duplicate.status_code == 400

    updated = client.put(f"/api/clients/{client_id}", json={"address": "Dock 4"})
    assert updated.json()["address"] == "Dock 4"
    assert updated.json()["contactPerson"] == "S. Iyer"

    assert client.delete(f"/api/clients/{client_id}").status_code == 204
    assert client.get(f"/api/clients/{client_id}").json() == {"message": "Client not found"}
