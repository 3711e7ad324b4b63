"""Database model for weekly problems."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Problem(SQLModel, table=True):
    """Answer key for one week. Rows are append-only; the newest wins."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    week: int = ORMField(index=True)
    correct_answer: str
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Problem"]
