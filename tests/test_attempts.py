from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def _create_attempt():
    r = client.post("/ocr/mark", json={"text": "2 + 2", "answers": ["4"]})
    assert r.status_code == 200
    attempt_id = r.json().get("attempt_id")
    assert isinstance(attempt_id, int)
    return attempt_id


def test_get_attempt_roundtrip():
    attempt_id = _create_attempt()

    r2 = client.get(f"/attempts/{attempt_id}")
    assert r2.status_code == 200
    body = r2.json()
    assert body["id"] == attempt_id
    assert body["source"] == "ocr"
    assert body["total"] == 1 and body["correct"] == 1
    assert body["items"][0]["question"] == "2 + 2"
    assert "created_at" in body


def test_get_attempt_404():
    r = client.get("/attempts/999999")
    assert r.status_code == 404


def test_recent_list_unauthorized(monkeypatch):
    monkeypatch.setenv("GRADING_API_KEY", "k")
    r = client.get("/attempts/recent-list")
    assert r.status_code == 401


def test_recent_list_with_api_key(monkeypatch):
    monkeypatch.setenv("GRADING_API_KEY", "k")
    attempt_id = _create_attempt()
    r = client.get("/attempts/recent-list?limit=5&source=ocr", headers={"x-api-key": "k"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert 1 <= body["count"] <= 5
    assert body["items"][0]["id"] == attempt_id
    assert "items" not in body["items"][0]


def test_delete_attempt_requires_admin(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    attempt_id = _create_attempt()

    r = client.delete(f"/attempts/{attempt_id}")
    assert r.status_code == 401

    r = client.delete(f"/attempts/{attempt_id}", headers={"x-admin-token": "secret"})
    assert r.status_code == 200 and r.json()["ok"] is True
    assert client.get(f"/attempts/{attempt_id}").status_code == 404
