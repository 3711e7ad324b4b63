"""Database models for quiz participants and their answers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Participant identified by email.

    ``attempts`` counts every scored submission over the user's lifetime;
    ``problems_solved`` is the score for the current week and is reset by the
    weekly rotation.
    """

    __tablename__ = "quiz_user"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    email: str = ORMField(index=True, unique=True)
    name: str
    attempts: int = 0
    problems_solved: int = ORMField(default=0, index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


class UserResponse(SQLModel, table=True):
    """One recorded answer attempt, kept until the next rotation."""

    __tablename__ = "user_response"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="quiz_user.id", index=True)
    week: int = ORMField(index=True)
    answer: str
    correct: bool
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User", "UserResponse"]
