from fastapi.testclient import TestClient

from db import SessionLocal
from main import app
from models import Attempt

client = TestClient(app)


def test_mark_records_measured_duration_ms():
    r = client.post("/ocr/mark", json={"text": "1 + 1\n3 x 3", "answers": ["2", "9"]})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body.get("attempt_id") is not None
    attempt_id = body["attempt_id"]

    db = SessionLocal()
    try:
        a = db.query(Attempt).filter(Attempt.id == attempt_id).first()
        assert a is not None
        assert a.duration_ms is not None
        assert isinstance(a.duration_ms, int)
        assert a.duration_ms >= 0
    finally:
        db.close()


def test_mark_keeps_client_duration_ms():
    r = client.post("/ocr/mark", json={"text": "1 + 1", "answers": ["2"], "duration_ms": 4200})
    body = r.json()
    assert body["duration_ms"] == 4200


def test_mark_rejects_negative_duration():
    r = client.post("/ocr/mark", json={"text": "1 + 1", "answers": ["2"], "duration_ms": -1})
    assert r.status_code == 422
