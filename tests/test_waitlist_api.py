"""Integration tests for the public waitlist endpoint."""
from __future__ import annotations

from fastapi.testclient import TestClient

from waitlist.models import EmailSubscriber, NotificationSent


def test_subscribe_new_email(test_client: TestClient, db_session, sender):
    response = test_client.post(
        "/api/waitlist/subscribe",
        json={"email": "ann@campus.edu", "firstName": "Ann"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["emailSent"] is True
    assert "Ann" in data["message"]
    assert db_session.query(EmailSubscriber).count() == 1
    assert len(sender.sent) == 1


def test_subscribe_duplicate_is_soft_success(test_client: TestClient, db_session):
    payload = {"email": "ann@campus.edu", "firstName": "Ann"}
    test_client.post("/api/waitlist/subscribe", json=payload)
    response = test_client.post("/api/waitlist/subscribe", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert "already" in data["message"]
    assert db_session.query(EmailSubscriber).count() == 1


def test_subscribe_invalid_email_returns_400(test_client: TestClient, db_session):
    response = test_client.post(
        "/api/waitlist/subscribe",
        json={"email": "not-an-email", "firstName": "Ann"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["emailSent"] is False
    assert data["message"] == "Invalid email format"
    assert db_session.query(NotificationSent).count() == 0


def test_subscribe_invalid_first_name_returns_400(test_client: TestClient):
    response = test_client.post(
        "/api/waitlist/subscribe",
        json={"email": "john@campus.edu", "firstName": "John123"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_subscribe_missing_field_is_422(test_client: TestClient):
    response = test_client.post("/api/waitlist/subscribe", json={"email": "ann@campus.edu"})

    assert response.status_code == 422


def test_health(test_client: TestClient):
    response = test_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
