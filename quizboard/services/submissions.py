"""Recording and scoring of weekly answer attempts."""

from __future__ import annotations

import logging
from typing import Any, Dict

from sqlalchemy import insert, literal, select as sa_select, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from ..core import MAX_ATTEMPTS_PER_WEEK, utcnow
from ..core.errors import AttemptLimitExceeded, ProblemNotFound
from ..models import User, UserResponse
from .problems import find_problem
from .validation import coerce_week, require_text

logger = logging.getLogger(__name__)


def attempts_this_week(session: Session, user_id: int, week: int) -> int:
    """Count the responses ``user_id`` has recorded for ``week``."""

    return session.exec(
        select(func.count(UserResponse.id)).where(
            UserResponse.user_id == user_id, UserResponse.week == week
        )
    ).one()


def _find_user(session: Session, email: str) -> User | None:
    return session.exec(select(User).where(User.email == email)).first()


def _create_user(session: Session, name: str, email: str) -> User:
    user = User(name=name, email=email)
    session.add(user)
    try:
        session.flush()
    except IntegrityError:
        # Another request registered the same email first.
        session.rollback()
        return session.exec(select(User).where(User.email == email)).one()
    logger.debug("Registered new participant %s", email)
    return user


def _record_attempt(
    session: Session,
    user_id: int,
    week: int,
    answer: str,
    is_correct: bool,
    max_attempts: int,
) -> None:
    """Bump the user's counters and append the response in one transaction.

    The counter update takes the user row's write lock before the response is
    inserted, and the insert only writes a row while fewer than
    ``max_attempts`` responses exist for the week. Concurrent submissions for
    the same user therefore cannot exceed the cap.
    """

    session.exec(
        update(User)
        .where(User.id == user_id)
        .values(
            attempts=User.attempts + 1,
            problems_solved=User.problems_solved + (1 if is_correct else 0),
        )
        .execution_options(synchronize_session=False)
    )

    recorded = (
        sa_select(func.count(UserResponse.id))
        .where(UserResponse.user_id == user_id, UserResponse.week == week)
        .correlate(None)
        .scalar_subquery()
    )
    guarded_insert = insert(UserResponse.__table__).from_select(
        ["user_id", "week", "answer", "correct", "created_at"],
        sa_select(
            literal(user_id),
            literal(week),
            literal(answer),
            literal(is_correct),
            literal(utcnow()),
        ).where(recorded < max_attempts),
    )
    result = session.exec(guarded_insert)
    if result.rowcount != 1:
        raise AttemptLimitExceeded()


def submit_answer(
    session: Session,
    *,
    name: Any,
    email: Any,
    answer: Any,
    week: Any,
    max_attempts: int = MAX_ATTEMPTS_PER_WEEK,
) -> Dict[str, bool]:
    """Score one answer for ``week`` and record it against the user.

    Raises ``ValidationError`` for missing fields, ``AttemptLimitExceeded``
    once the user has ``max_attempts`` responses for the week and
    ``ProblemNotFound`` when no problem exists for the week. None of the
    failures change stored state.
    """

    name = require_text(name)
    email = require_text(email)
    answer = require_text(answer, strip=False)
    week = coerce_week(week)

    user = _find_user(session, email)
    if user is not None and attempts_this_week(session, user.id, week) >= max_attempts:
        logger.warning("Attempt limit reached for %s in week %s", email, week)
        raise AttemptLimitExceeded()

    problem = find_problem(session, week)
    if problem is None:
        raise ProblemNotFound()

    is_correct = answer == problem.correct_answer

    if user is None:
        user = _create_user(session, name, email)

    try:
        _record_attempt(session, user.id, week, answer, is_correct, max_attempts)
    except AttemptLimitExceeded:
        session.rollback()
        logger.warning("Concurrent attempt over the limit for %s in week %s", email, week)
        raise
    session.commit()

    return {"correct": is_correct}


__all__ = ["attempts_this_week", "submit_answer"]
