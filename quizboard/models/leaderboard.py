"""Database model for archived weekly standings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Leaderboard(SQLModel, table=True):
    """Frozen top players of a finished week."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    week: int = ORMField(index=True, unique=True)
    top_players_json: str
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Leaderboard"]
