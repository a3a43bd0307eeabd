# services/grading/schemas/ocr.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

# ---------- Extract ----------


class ExtractRequest(BaseModel):
    text: str


class ProblemOut(BaseModel):
    question: str
    answer: str


class ExtractResponse(BaseModel):
    ok: bool
    count: int
    problems: List[ProblemOut]
    feedback: Optional[str] = None


# ---------- Mark ----------


class OcrMarkRequest(BaseModel):
    text: str
    answers: List[Optional[str]] = Field(default_factory=list)
    # Client may send it, but server computes its own duration anyway.
    duration_ms: Optional[int] = Field(default=None, ge=0)


class OcrMarkItem(BaseModel):
    question: str
    expected: str
    response: str
    correct: bool
    score: int
    feedback: str


class OcrMarkResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    results: List[OcrMarkItem]
    attempt_id: Optional[int] = None
    duration_ms: Optional[int] = None
    feedback: Optional[str] = None
