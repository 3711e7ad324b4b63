"""Weekly rotation: archive standings, reset scores, open the next week."""

from __future__ import annotations

import json
import logging
import threading

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core import PLACEHOLDER_ANSWER, SNAPSHOT_SIZE
from ..core.errors import RotationInProgress
from ..models import Leaderboard, Problem, User, UserResponse
from .leaderboard import latest_leaderboard_week, top_players
from .problems import find_problem

logger = logging.getLogger(__name__)

# Held for the whole rotation; a trigger that finds it taken is rejected.
rotation_lock = threading.Lock()


def _rotate(session: Session, placeholder_answer: str, snapshot_size: int) -> Leaderboard:
    new_week = None
    try:
        new_week = latest_leaderboard_week(session) + 1
        standings = top_players(session, snapshot_size)
        snapshot = Leaderboard(week=new_week, top_players_json=json.dumps(standings))

        # The snapshot must be written before scores are zeroed.
        session.add(snapshot)
        session.flush()

        session.exec(
            update(User)
            .values(problems_solved=0)
            .execution_options(synchronize_session=False)
        )
        session.exec(delete(UserResponse).execution_options(synchronize_session=False))

        if find_problem(session, new_week) is None:
            session.add(Problem(week=new_week, correct_answer=placeholder_answer))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Weekly rotation failed and was rolled back (target week %s)", new_week)
        raise

    session.refresh(snapshot)
    logger.info("Week %s has started with a new problem", new_week)
    return snapshot


def rotate_week(
    session: Session,
    *,
    placeholder_answer: str = PLACEHOLDER_ANSWER,
    snapshot_size: int = SNAPSHOT_SIZE,
) -> Leaderboard:
    """Archive the current top players and start the next week.

    Raises ``RotationInProgress`` if another rotation holds the lock.
    """

    if not rotation_lock.acquire(blocking=False):
        raise RotationInProgress()
    try:
        return _rotate(session, placeholder_answer, snapshot_size)
    finally:
        rotation_lock.release()


__all__ = ["rotate_week", "rotation_lock"]
