from __future__ import annotations

import logging
import os
import time
from typing import Optional

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from db import SessionLocal
from grading import mark_responses
from models import Attempt
from ocr_math import extract_and_solve
from schemas.ocr import ExtractRequest, ExtractResponse, OcrMarkRequest, OcrMarkResponse

logger = logging.getLogger(__name__)

# Raw OCR text of a worksheet page is a few KB; anything far larger is not a worksheet
OCR_TEXT_LIMIT = int(os.getenv("OCR_TEXT_LIMIT", "20000"))
_TOO_LONG_MSG = f"Text too long (> {OCR_TEXT_LIMIT} characters)."

router = APIRouter(prefix="/ocr", tags=["ocr"])


def _validate_text(text: str) -> Optional[str]:
    if len(text) > OCR_TEXT_LIMIT:
        return _TOO_LONG_MSG
    return None


@router.post("/extract", response_model=ExtractResponse)
def extract(req: ExtractRequest):
    err = _validate_text(req.text)
    if err:
        return {"ok": False, "count": 0, "problems": [], "feedback": err}

    problems = extract_and_solve(req.text)
    logger.info("ocr extract: %d chars -> %d problems", len(req.text), len(problems))
    return {
        "ok": True,
        "count": len(problems),
        "problems": [p.model_dump() for p in problems],
    }


@router.post("/mark", response_model=OcrMarkResponse)
def mark(req: OcrMarkRequest):
    t0 = time.perf_counter()

    err = _validate_text(req.text)
    if err:
        return {"ok": False, "total": 0, "correct": 0, "results": [], "feedback": err}

    problems = extract_and_solve(req.text)
    results, correct_count = mark_responses(problems, req.answers)
    total = len(results)

    measured_ms = int(round((time.perf_counter() - t0) * 1000))
    duration_ms = req.duration_ms if req.duration_ms is not None else measured_ms

    attempt_id: Optional[int] = None
    try:
        with SessionLocal() as db:
            attempt = Attempt(
                source="ocr",
                total=total,
                correct=correct_count,
                items=results,
                duration_ms=duration_ms,
            )
            db.add(attempt)
            db.commit()
            db.refresh(attempt)
            attempt_id = attempt.id
    except SQLAlchemyError:
        logger.exception("ocr mark: failed to record attempt")
        attempt_id = None

    logger.info("ocr mark: %d/%d correct (attempt %s)", correct_count, total, attempt_id)
    return {
        "ok": True,
        "total": total,
        "correct": correct_count,
        "results": results,
        "attempt_id": attempt_id,
        "duration_ms": duration_ms,
    }
