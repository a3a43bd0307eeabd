from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class Attempt(Base):
    """One graded flashcard run: the answer key came from OCR text."""

    __tablename__ = "attempts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )
    source: Mapped[str] = mapped_column(String(16), default="ocr", server_default="ocr")
    total: Mapped[int] = mapped_column(Integer)
    correct: Mapped[int] = mapped_column(Integer)
    items: Mapped[list] = mapped_column(JSON)  # per-flashcard marking results
    duration_ms: Mapped[int] = mapped_column(sa.Integer, nullable=True)
