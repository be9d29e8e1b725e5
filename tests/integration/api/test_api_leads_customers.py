from __future__ import annotations


def _company(client, name: str) -> int:
    response = client.post("/api/companies", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


def test_lead_lifecycle_with_company_name(client):
    company_id = _company(client, "ABC Infra")

    created = client.post(
        "/api/leads",
        json={"title": "Bridge repair", "companyId": company_id, "source": "Portal", "emdValue": "25000"},
    )
    assert created.status_code == 201
    lead = created.json()
    assert lead["companyName"] == "ABC Infra"
    assert lead["status"] == "New"
    assert lead["emdValue"] == "25000"

    updated = client.patch(f"/api/leads/{lead['id']}", json={"status": "Negotiation"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "Negotiation"
    assert updated.json()["title"] == "Bridge repair"

    assert client.delete(f"/api/leads/{lead['id']}").status_code == 204
    assert client.get(f"/api/leads/{lead['id']}").status_code == 404

    descriptions = [row["description"] for row in client.get("/api/activities/recent", params={"limit": 3}).json()]
    assert descriptions == ["Lead deleted: Bridge repair", "Lead updated: Bridge repair", "New lead created: Bridge repair"]


def test_lead_filters(client):
    abc = _company(client, "ABC Infra")
    other = _company(client, "Northwind")
    client.post("/api/leads", json={"title": "Road", "companyId": abc, "source": "Portal"})
    client.post("/api/leads", json={"title": "Canal", "companyId": other, "status": "Contacted"})
    client.post("/api/leads", json={"title": "Metro", "companyId": other, "source": "Referral"})

    def titles(**params) -> set[str]:
        return {row["title"] for row in client.get("/api/leads", params=params).json()}

    assert titles(search="abc") == {"Road"}
    assert titles(status="Contacted") == {"Canal"}
    assert titles(source="Referral") == {"Metro"}
    assert titles() == {"Road", "Canal", "Metro"}


def test_lead_rejects_non_numeric_emd_and_unknown_company(client):
    company_id = _company(client, "Initech")
    bad_emd = client.post("/api/leads", json={"title": "Dam", "companyId": company_id, "emdValue": "lots"})
    assert bad_emd.status_code == 400
    assert "emdValue" in bad_emd.json()["message"]

    missing_company = client.post("/api/leads", json={"title": "Dam", "companyId": 999})
    assert missing_company.status_code == 400


def test_lead_rejects_non_finite_emd(client):
    company_id = _company(client, "Hooli")
    for value in ("NaN", "Infinity", "-Infinity"):
        response = client.post("/api/leads", json={"title": "Lead X", "companyId": company_id, "emdValue": value})
        assert response.status_code == 400, value
        assert "emdValue" in response.json()["message"]

    lead = client.post("/api/leads", json={"title": "Lead Y", "companyId": company_id}).json()
    patched = client.patch(f"/api/leads/{lead['id']}", json={"emdValue": "NaN"})
    assert patched.status_code == 400
    assert client.get("/api/leads").json()[0]["emdValue"] == "0"


def test_customer_filters_and_crud(client):
    client.post("/api/customers", json={"name": "Ravi", "company": "ABC Traders", "type": "Private"})
    client.post("/api/customers", json={"name": "Meera", "email": "meera@abc.example", "type": "Government"})
    omar = client.post("/api/customers", json={"name": "Omar", "status": "Inactive", "type": "Private"}).json()

    def names(**params) -> set[str]:
        return {row["name"] for row in client.get("/api/customers", params=params).json()}

    assert names(search="ABC") == {"Ravi", "Meera"}
    assert names(type="Private") == {"Ravi", "Omar"}
    assert names(status="Inactive", type="Private") == {"Omar"}

    updated = client.put(f"/api/customers/{omar['id']}", json={"status": "Active"})
    assert updated.status_code == 200
    assert updated.json()["type"] == "Private"
    assert client.delete(f"/api/customers/{omar['id']}").status_code == 204
    assert client.get(f"/api/customers/{omar['id']}").status_code == 404
