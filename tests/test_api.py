"""
HTTP-level tests: routing, status codes, camelCase wire format and
error envelopes. Stores start empty for every test (see conftest.py).
"""

import pytest
from fastapi.testclient import TestClient

from local_agent import config
from local_agent.main import app
from local_agent.sample_data import load_sample_data
from local_agent.store import access_log_store, consent_store, notification_store

NEW_CONSENT = {
    "serviceProviderId": "sp1",
    "serviceProviderName": "Health Portal X",
    "dataTypes": ["health.heartrate"],
    "purpose": "dashboard",
}


def create_consent(client, **overrides) -> dict:
    resp = client.post("/api/v1/consents", json={**NEW_CONSENT, **overrides})
    assert resp.status_code == 201
    return resp.json()["data"]


class TestConsentEndpoints:

    def test_create(self, client):
        resp = client.post("/api/v1/consents", json=NEW_CONSENT)
        body = resp.json()

        assert resp.status_code == 201
        assert body["success"] is True
        assert "error" not in body
        consent = body["data"]
        assert consent["status"] == "active"
        assert consent["grantedDataTypes"] == []
        assert consent["createdAt"] == consent["updatedAt"]
        assert consent["dataCustodianId"] == config.AGENT_DID
        assert "expiresAt" not in consent

    def test_create_missing_purpose(self, client):
        payload = {k: v for k, v in NEW_CONSENT.items() if k != "purpose"}
        resp = client.post("/api/v1/consents", json=payload)
        body = resp.json()

        assert resp.status_code == 400
        assert body["success"] is False
        assert body["error"]["code"] == "BAD_REQUEST"
        assert "data" not in body

    def test_create_empty_data_types(self, client):
        resp = client.post("/api/v1/consents", json={**NEW_CONSENT, "dataTypes": []})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "BAD_REQUEST"

    def test_create_bad_status_value(self, client):
        resp = client.post("/api/v1/consents", json={**NEW_CONSENT, "status": "approved"})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "BAD_REQUEST"

    def test_get_round_trip(self, client):
        created = create_consent(client)
        resp = client.get(f"/api/v1/consents/{created['consentId']}")
        assert resp.status_code == 200
        assert resp.json()["data"] == created

    def test_get_unknown(self, client):
        resp = client.get("/api/v1/consents/unknown")
        assert resp.status_code == 404
        assert resp.json()["error"] == {"code": "NOT_FOUND", "message": "Consent not found"}

    def test_list_filtered_by_status(self, client):
        create_consent(client)
        revoked = create_consent(client, status="revoked")

        resp = client.get("/api/v1/consents", params={"status": "revoked", "page": 1, "pageSize": 10})
        body = resp.json()

        assert resp.status_code == 200
        assert [c["consentId"] for c in body["data"]] == [revoked["consentId"]]
        assert body["pagination"] == {"page": 1, "pageSize": 10, "totalItems": 1, "totalPages": 1}

    def test_list_default_paging(self, client):
        for i in range(12):
            create_consent(client, purpose=f"p{i}")
        body = client.get("/api/v1/consents").json()
        assert len(body["data"]) == 10
        assert body["pagination"]["totalPages"] == 2

    def test_list_rejects_zero_page_size(self, client):
        resp = client.get("/api/v1/consents", params={"pageSize": 0})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "BAD_REQUEST"

    def test_update(self, client):
        created = create_consent(client)
        resp = client.put(
            f"/api/v1/consents/{created['consentId']}",
            json={"status": "expired", "grantedDataTypes": ["health.heartrate"]},
        )
        updated = resp.json()["data"]

        assert resp.status_code == 200
        assert updated["status"] == "expired"
        assert updated["grantedDataTypes"] == ["health.heartrate"]
        assert updated["purpose"] == "dashboard"

    def test_update_unknown(self, client):
        resp = client.put("/api/v1/consents/unknown", json={"purpose": "x"})
        assert resp.status_code == 404

    def test_revoke_twice(self, client):
        created = create_consent(client)
        url = f"/api/v1/consents/{created['consentId']}/revoke"
        assert client.post(url).json()["data"]["status"] == "revoked"
        second = client.post(url)
        assert second.status_code == 200
        assert second.json()["data"]["status"] == "revoked"

    def test_revoke_unknown(self, client):
        assert client.post("/api/v1/consents/unknown/revoke").status_code == 404

    def test_delete(self, client):
        created = create_consent(client)
        resp = client.delete(f"/api/v1/consents/{created['consentId']}")
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"/api/v1/consents/{created['consentId']}").status_code == 404

    def test_delete_unknown(self, client):
        create_consent(client)
        resp = client.delete("/api/v1/consents/unknown")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"
        assert len(consent_store) == 1

    def test_delete_leaves_log_link_dangling(self, client):
        created = create_consent(client)
        client.post("/api/v1/data-access-logs", json={
            "serviceProviderId": "sp1",
            "serviceProviderName": "Health Portal X",
            "dataType": "health.heartrate",
            "action": "read",
            "success": True,
            "consentId": created["consentId"],
        })
        client.delete(f"/api/v1/consents/{created['consentId']}")

        exported = client.get("/api/v1/data-access-logs/export").json()["data"]
        assert exported[0]["consentId"] == created["consentId"]


class TestAccessLogEndpoints:

    def test_append_and_list(self, client):
        resp = client.post("/api/v1/data-access-logs", json={
            "serviceProviderId": "sp2",
            "serviceProviderName": "GovService Y",
            "dataType": "profile.address",
            "action": "read",
            "success": False,
            "details": "User not found in external system",
        })
        assert resp.status_code == 201
        entry = resp.json()["data"]
        assert entry["success"] is False
        assert "timestamp" in entry

        body = client.get("/api/v1/data-access-logs").json()
        assert body["pagination"]["totalItems"] == 1
        assert body["data"][0]["logId"] == entry["logId"]

    def test_append_missing_success(self, client):
        resp = client.post("/api/v1/data-access-logs", json={
            "serviceProviderId": "sp2",
            "serviceProviderName": "GovService Y",
            "dataType": "profile.address",
            "action": "read",
        })
        assert resp.status_code == 400

    def test_export_is_unpaginated(self, client):
        load_sample_data()
        body = client.get("/api/v1/data-access-logs/export").json()
        assert body["success"] is True
        assert len(body["data"]) == len(access_log_store)
        assert "pagination" not in body


class TestNotificationEndpoints:

    def test_unread_only_and_mark_read(self, client):
        load_sample_data()
        unread = client.get("/api/v1/notifications", params={"unreadOnly": "true"}).json()
        assert unread["pagination"]["totalItems"] == 2
        assert all(n["isRead"] is False for n in unread["data"])

        target = unread["data"][0]["notificationId"]
        resp = client.post(f"/api/v1/notifications/{target}/mark-read")
        assert resp.status_code == 200
        assert resp.json()["data"]["isRead"] is True

        again = client.post(f"/api/v1/notifications/{target}/mark-read")
        assert again.status_code == 200
        assert again.json()["data"]["isRead"] is True

        remaining = client.get("/api/v1/notifications", params={"unreadOnly": "true"}).json()
        assert remaining["pagination"]["totalItems"] == 1

    def test_mark_read_unknown(self, client):
        resp = client.post("/api/v1/notifications/unknown/mark-read")
        assert resp.status_code == 404
        assert resp.json()["error"]["message"] == "Notification not found"

    def test_create(self, client):
        resp = client.post("/api/v1/notifications", json={
            "type": "system_update",
            "title": "Agent updated",
            "message": "Version 0.1.0 is now running.",
        })
        assert resp.status_code == 201
        assert resp.json()["data"]["isRead"] is False
        assert len(notification_store) == 1


class TestSystemEndpoints:

    def test_status(self, client):
        create_consent(client)
        data = client.get("/api/v1/status").json()["data"]
        assert data["isRunning"] is True
        assert data["consentsStored"] == 1

    def test_auth_initiate(self, client):
        data = client.post("/api/v1/auth/initiate").json()["data"]
        assert data["agentDid"] == config.AGENT_DID
        assert data["sessionToken"]

    def test_identity(self, client, monkeypatch):
        monkeypatch.setattr(config, "IDENTITY_DELAY_SECONDS", 0)
        data = client.get("/api/v1/identity").json()["data"]
        assert data["fullName"] == "John Alistair Doe"
        assert data["permanentAddress"]["postalCode"] == "V6B 1A2"

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Mock Local Agent is running" in resp.text

    def test_unknown_route(self, client):
        resp = client.get("/api/v1/nothing-here")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_internal_error_envelope(self, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(consent_store, "list", explode)
        client = TestClient(app, raise_server_exceptions=False)

        resp = client.get("/api/v1/consents")

        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


class TestSampleData:

    def test_seeded_on_startup(self, monkeypatch):
        monkeypatch.setattr(config, "SEED_SAMPLE_DATA", True)
        with TestClient(app) as client:
            body = client.get("/api/v1/consents").json()
        assert body["pagination"]["totalItems"] == 3
        assert {c["status"] for c in body["data"]} == {"active", "pending", "revoked"}

    def test_links_resolve(self):
        load_sample_data()
        consent_ids = {c.consent_id for c in consent_store.list(page_size=100)[0]}
        linked = [e.consent_id for e in access_log_store.export_all() if e.consent_id]
        assert linked and all(cid in consent_ids for cid in linked)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
