# services/grading/routers/health.py
import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from alembic.config import Config
from alembic.script import ScriptDirectory
from db import engine
from ocr_math import extract_and_solve

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

# One line per operator, including the OCR-style "x" and a non-terminating quotient
_OCR_PROBE = "1 + 1\n5 - 10\n3 x 4\n10 ÷ 3"
_OCR_PROBE_EXPECTED = [
    {"question": "1 + 1", "answer": "2"},
    {"question": "5 - 10", "answer": "-5"},
    {"question": "3 × 4", "answer": "12"},
    {"question": "10 ÷ 3", "answer": "3.33"},
]


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        logger.warning("health db check failed: %s", e)
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")


@router.get("/ocr")
def health_ocr():
    got = [p.model_dump() for p in extract_and_solve(_OCR_PROBE)]
    ok = got == _OCR_PROBE_EXPECTED
    if not ok:
        logger.error("ocr engine probe mismatch: %r", got)
    return {"ok": ok, "problems": got}


def _alembic_heads() -> list[str]:
    cfg = Config("alembic.ini")
    script = ScriptDirectory.from_config(cfg)
    return list(script.get_heads())


@router.get("/migrations")
def health_migrations():
    heads: list[str] = []
    db_ver = None
    try:
        heads = _alembic_heads()
    except Exception as e:
        logger.warning("could not read alembic heads: %s", e)

    try:
        with engine.connect() as conn:
            try:
                db_ver = conn.execute(
                    text("SELECT version_num FROM alembic_version")
                ).scalar_one_or_none()
            except Exception:
                db_ver = None
    except Exception as e:
        return {
            "ok": False,
            "error": f"db_connect_failed: {e}",
            "code_heads": heads,
            "db_version": db_ver,
        }

    synced = (db_ver in heads) if heads else False
    return {"ok": synced, "synced": synced, "db_version": db_ver, "code_heads": heads}
