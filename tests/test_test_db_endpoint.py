"""
GET /api/test-db: 200 with the probe row, 500 with the error, never an exception.
"""

from __future__ import annotations

from datetime import datetime


def test_healthy_store_returns_200(client):
    resp = client.get("/api/test-db")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["message"] == "Hello from Neon!"
    assert "error" not in body
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_unreachable_store_returns_500(failing_client):
    resp = failing_client.get("/api/test-db")

    assert resp.status_code == 500
    body = resp.json()
    assert body == {"success": False, "error": "connection refused", "timestamp": body["timestamp"]}
    assert "data" not in body


def test_repeated_calls_are_idempotent(client):
    stamps = []
    for _ in range(3):
        resp = client.get("/api/test-db")
        assert resp.status_code == 200
        assert resp.json()["success"] is True
        stamps.append(datetime.fromisoformat(resp.json()["timestamp"].replace("Z", "+00:00")))

    assert stamps == sorted(stamps)
