from fastapi.testclient import TestClient

from main import app
from routers.ocr import OCR_TEXT_LIMIT

client = TestClient(app)


def test_extract():
    r = client.post("/ocr/extract", json={"text": "1 + 1\n3 x 4\n10 / 0"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["count"] == 2
    assert body["problems"] == [
        {"question": "1 + 1", "answer": "2"},
        {"question": "3 × 4", "answer": "12"},
    ]


def test_extract_nothing_found():
    r = client.post("/ocr/extract", json={"text": "Lesson 1"})
    body = r.json()
    assert body["ok"] is True and body["count"] == 0 and body["problems"] == []


def test_extract_text_too_long():
    r = client.post("/ocr/extract", json={"text": "1" * (OCR_TEXT_LIMIT + 1)})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is False
    assert "too long" in body.get("feedback", "").lower()


def test_extract_missing_text_is_422():
    r = client.post("/ocr/extract", json={})
    assert r.status_code == 422


def test_mark():
    r = client.post(
        "/ocr/mark",
        json={"text": "1 + 1\n10 ÷ 3\n5 - 10", "answers": ["2", "3.33", "5"]},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["total"] == 3
    assert body["correct"] == 2
    assert [it["correct"] for it in body["results"]] == [True, True, False]
    assert body["results"][2]["feedback"] == "Expected -5."
    assert isinstance(body["attempt_id"], int)


def test_mark_text_too_long():
    r = client.post("/ocr/mark", json={"text": "x" * (OCR_TEXT_LIMIT + 1), "answers": []})
    body = r.json()
    assert body["ok"] is False and body["total"] == 0
    assert body.get("attempt_id") is None
