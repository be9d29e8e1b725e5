from __future__ import annotations


def _create_tender(client, reference: str = "DOC-1", title: str = "Road Project") -> dict:
    response = client.post(
        "/api/tenders",
        json={
            "referenceNumber": reference,
            "title": title,
            "publishDate": "2026-01-01",
            "dueDate": "2026-01-31",
            "description": "Resurfacing works",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def _upload(client, tender_id: int, filename: str) -> dict:
    response = client.post(
        "/api/documents",
        json={
            "tenderId": tender_id,
            "filename": filename,
            "filesize": 1024,
            "filetype": "application/pdf",
            "path": f"tenders/{tender_id}/{filename}",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_tender_creation_logs_one_activity(client):
    _create_tender(client, title="Road Project")

    feed = client.get("/api/activities/recent", params={"limit": 100}).json()

    assert len(feed) == 1
    assert feed[0]["description"] == "New tender added: Road Project"
    assert feed[0]["activityType"] == "CREATE_TENDER"
    assert feed[0]["userId"] == 1
    assert feed[0]["userName"] == "Admin User"


def test_recent_activity_limit_and_ordering(client):
    for index in range(1, 6):
        assert client.post("/api/companies", json={"name": f"Company {index}"}).status_code == 201

    feed = client.get("/api/activities/recent", params={"limit": 3}).json()

    assert [row["description"] for row in feed] == [
        "New company added: Company 5",
        "New company added: Company 4",
        "New company added: Company 3",
    ]
    timestamps = [row["timestamp"] for row in feed]
    assert timestamps == sorted(timestamps, reverse=True)


def test_recent_activity_defaults_to_five(client):
    for index in range(7):
        client.post("/api/customers", json={"name": f"Customer {index}"})

    assert len(client.get("/api/activities/recent").json()) == 5
    assert client.get("/api/activities/recent", params={"limit": 0}).status_code == 400


def test_tender_and_user_activity_feeds(client):
    tender = _create_tender(client)
    client.patch(f"/api/tenders/{tender['id']}", json={"title": "Road Project II"})

    tender_feed = client.get(f"/api/tenders/{tender['id']}/activities").json()
    assert [row["activityType"] for row in tender_feed] == ["UPDATE_TENDER", "CREATE_TENDER"]

    user_feed = client.get("/api/users/1/activities").json()
    assert len(user_feed) == 2
    assert client.get("/api/users/999/activities").status_code == 404


def test_documents_attach_to_tender(client):
    tender = _create_tender(client)
    document = _upload(client, tender["id"], "nit.pdf")

    assert document["uploadedBy"] == 1
    detail = client.get(f"/api/tenders/{tender['id']}").json()
    assert [row["filename"] for row in detail["documents"]] == ["nit.pdf"]
    assert [row["id"] for row in client.get(f"/api/tenders/{tender['id']}/documents").json()] == [document["id"]]
    assert client.get(f"/api/documents/{document['id']}").status_code == 200


def test_document_for_missing_tender_is_404(client):
    response = client.post(
        "/api/documents",
        json={"tenderId": 999, "filename": "a.pdf", "filesize": 1, "filetype": "pdf", "path": "a.pdf"},
    )
    assert response.status_code == 404


def test_document_filesize_must_fit_column(client):
    tender = _create_tender(client)
    response = client.post(
        "/api/documents",
        json={
            "tenderId": tender["id"],
            "filename": "huge.iso",
            "filesize": 2**31,
            "filetype": "application/octet-stream",
            "path": "huge.iso",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("filesize:")
    assert client.get("/api/documents").json() == []


def test_deleting_tender_cascades_documents(client):
    tender = _create_tender(client)
    _upload(client, tender["id"], "boq.xlsx")
    _upload(client, tender["id"], "drawings.zip")

    assert client.delete(f"/api/tenders/{tender['id']}").status_code == 204

    assert client.get(f"/api/tenders/{tender['id']}/documents").json() == []
    assert client.get("/api/documents").json() == []
    feed = client.get("/api/activities/recent").json()
    assert feed[0]["description"] == "Tender deleted: Road Project (DOC-1)"
    assert all(row["tenderId"] is None for row in feed)


def test_delete_document(client):
    tender = _create_tender(client)
    document = _upload(client, tender["id"], "nit.pdf")

    assert client.delete(f"/api/documents/{document['id']}").status_code == 204
    assert client.delete(f"/api/documents/{document['id']}").status_code == 404
