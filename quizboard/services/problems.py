"""Lookups and authoring for weekly problems."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlmodel import Session, func, select

from ..models import Problem
from .validation import coerce_week, require_text

logger = logging.getLogger(__name__)


def find_problem(session: Session, week: int) -> Optional[Problem]:
    """Return the active problem for ``week``: the newest row with that week."""

    return session.exec(
        select(Problem).where(Problem.week == week).order_by(Problem.id.desc()).limit(1)
    ).first()


def active_week(session: Session) -> Optional[int]:
    """Highest week that has a published problem, derived from stored rows."""

    return session.exec(select(func.max(Problem.week))).one()


def publish_problem(session: Session, week: Any, correct_answer: Any) -> Problem:
    """Insert a new answer key for ``week``; earlier rows are kept as history."""

    problem = Problem(
        week=coerce_week(week),
        correct_answer=require_text(correct_answer, strip=False),
    )
    session.add(problem)
    session.commit()
    session.refresh(problem)
    logger.info("Published problem for week %s", problem.week)
    return problem


__all__ = ["active_week", "find_problem", "publish_problem"]
