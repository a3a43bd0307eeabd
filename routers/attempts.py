# grading/routers/attempts.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from db import SessionLocal
from deps.auth import require_admin, require_client
from models import Attempt
from schemas.attempts import AttemptOut

router = APIRouter(prefix="/attempts", tags=["attempts"])


@router.get("/recent-list", dependencies=[Depends(require_client)])
def attempts_recent(limit: int = 20, source: Optional[str] = Query(default=None, max_length=16)):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        q = db.query(Attempt)
        if source:
            q = q.filter(Attempt.source == source)
        items = q.order_by(Attempt.created_at.desc(), Attempt.id.desc()).limit(limit).all()

    # Reuse schema; exclude potentially large JSON "items"
    rows = [AttemptOut.model_validate(a).model_dump(exclude={"items"}) for a in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{attempt_id}", response_model=AttemptOut)
def get_attempt(attempt_id: int):
    # Public endpoint: learners open their own result link
    with SessionLocal() as db:
        a = db.get(Attempt, attempt_id)
        if not a:
            raise HTTPException(status_code=404, detail="Attempt not found")
        return AttemptOut.model_validate(a)


@router.delete("/{attempt_id}", dependencies=[Depends(require_admin)])
def delete_attempt(attempt_id: int):
    with SessionLocal() as db:
        a = db.get(Attempt, attempt_id)
        if not a:
            raise HTTPException(status_code=404, detail="Attempt not found")
        db.delete(a)
        db.commit()
    return {"ok": True, "id": attempt_id}
