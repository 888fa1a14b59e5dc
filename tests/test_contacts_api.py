"""
HTTP tests for /api/contacts through FastAPI's TestClient.
"""
from __future__ import annotations

from contacts_api.domain.results import ServiceResult
from contacts_api.repositories.fund_repository import FundRepository
from contacts_api.services.contact_service import ContactService


def test_create_contact_returns_201_with_location(client):
    resp = client.post("/api/contacts", json={"Name": "Ann"})

    assert resp.status_code == 201
    assert resp.headers["location"] == "/api/contacts/1"
    body = resp.json()
    assert body["status"] == "success"
    assert body["message"] == "Contact created successfully."
    assert body["errors"] == []
    assert body["data"] == {"id": 1, "name": "Ann", "email": None, "phone": None, "fundId": None}


def test_create_contact_accepts_any_key_casing(client):
    resp = client.post("/api/contacts", json={"name": "Bob", "EMAIL": "bob@example.com", "phone": "+1 (555) 010-0"})

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["email"] == "bob@example.com"
    assert data["phone"] == "+1 (555) 010-0"


def test_create_contact_validation(client):
    resp = client.post("/api/contacts", json={"Name": "", "Email": "not-an-email", "Phone": "call me"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "fail"
    assert body["message"] == "Validation failed"
    assert body["errors"] == [
        "Name is required",
        "A valid email address is required",
        "A valid phone number is required",
    ]
    assert client.get("/api/contacts").json()["data"] == []


def test_create_contact_name_too_long(client):
    resp = client.post("/api/contacts", json={"Name": "x" * 101})
    assert resp.status_code == 400
    assert resp.json()["errors"] == ["Name cannot exceed 100 characters"]


def test_malformed_json_is_rejected(client):
    resp = client.post("/api/contacts", content=b"{not json", headers={"content-type": "application/json"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "fail"
    assert body["message"] == "Invalid JSON format"


def test_list_and_get_contacts(client):
    client.post("/api/contacts", json={"Name": "Ann"})
    client.post("/api/contacts", json={"Name": "Bob"})

    listed = client.get("/api/contacts")
    assert listed.status_code == 200
    assert [c["name"] for c in listed.json()["data"]] == ["Ann", "Bob"]

    one = client.get("/api/contacts/2")
    assert one.status_code == 200
    assert one.json()["data"]["name"] == "Bob"


def test_get_missing_contact_is_400_fail(client):
    resp = client.get("/api/contacts/9")

    assert resp.status_code == 400
    assert resp.json()["status"] == "fail"
    assert resp.json()["message"] == "Contact not found."


def test_non_integer_id_is_validation_failure(client):
    resp = client.get("/api/contacts/abc")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"
    assert resp.json()["errors"][0].startswith("contact_id:")


def test_out_of_range_id_is_validation_failure(client):
    for resp in (
        client.get("/api/contacts/%d" % 2**63),
        client.put("/api/contacts/%d" % 2**63, json={"Name": "Ann"}),
        client.delete("/api/contacts/0"),
    ):
        assert resp.status_code == 400
        assert resp.json()["status"] == "fail"
        assert resp.json()["message"] == "Validation failed"
        assert resp.json()["errors"][0].startswith("contact_id:")


def test_unhandled_exception_keeps_only_first_line(db_env, monkeypatch):
    from fastapi.testclient import TestClient

    from contacts_api.app import create_app

    def boom(self):
        raise RuntimeError("line one\nSELECT secret FROM internal")

    monkeypatch.setattr(ContactService, "list_contacts", boom)
    client = TestClient(create_app(), raise_server_exceptions=False)

    resp = client.get("/api/contacts")

    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == "error"
    assert body["message"] == "An error occurred while processing your request"
    assert body["errors"] == ["line one"]


def test_update_round_trip_keeps_fund(client):
    FundRepository().add_fund("Alpha Fund")
    client.post("/api/contacts", json={"Name": "Ann"})
    client.post("/api/funds/1/contacts", json={"ContactId": 1})

    resp = client.put("/api/contacts/1", json={"Name": "Ann Smith", "Email": "ann@example.com"})

    assert resp.status_code == 200
    assert resp.json()["message"] == "Contact updated successfully."
    data = client.get("/api/contacts/1").json()["data"]
    assert data["name"] == "Ann Smith"
    assert data["email"] == "ann@example.com"
    assert data["fundId"] == 1


def test_update_missing_contact(client):
    resp = client.put("/api/contacts/4", json={"Name": "Ghost"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Contact not found."


def test_delete_contact_returns_204(client):
    client.post("/api/contacts", json={"Name": "Ann"})

    resp = client.delete("/api/contacts/1")

    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/api/contacts/1").status_code == 400


def test_delete_contact_in_fund_is_refused(client):
    FundRepository().add_fund("Alpha Fund")
    client.post("/api/contacts", json={"Name": "Ann"})
    client.post("/api/funds/1/contacts", json={"ContactId": 1})

    resp = client.delete("/api/contacts/1")

    assert resp.status_code == 400
    assert resp.json()["status"] == "fail"
    assert resp.json()["message"] == "Cannot delete contact assigned to a fund."


def test_server_failure_is_500_error(client, monkeypatch):
    monkeypatch.setattr(
        ContactService,
        "list_contacts",
        lambda self: ServiceResult.unexpected("An error occurred while retrieving contacts.", RuntimeError("down")),
    )

    resp = client.get("/api/contacts")

    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == "error"
    assert body["data"] is None
    assert body["message"] == "An error occurred while retrieving contacts."
    assert body["errors"] == ["down"]


def test_unknown_route_uses_envelope(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["status"] == "fail"
