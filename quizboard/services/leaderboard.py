"""Ranking of live standings and access to archived snapshots."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from sqlmodel import Session, func, select

from ..core import LEADERBOARD_LIMIT
from ..core.errors import SnapshotNotFound, ValidationError
from ..models import Leaderboard, User


def standing_to_dict(user: User) -> Dict[str, Any]:
    """Public projection of a user's standing."""

    return {
        "name": user.name,
        "problemsSolved": user.problems_solved,
        "attempts": user.attempts,
    }


def top_players(session: Session, limit: int = LEADERBOARD_LIMIT) -> List[Dict[str, Any]]:
    """Users by score descending, fewer attempts first on ties, then oldest first."""

    if limit < 1:
        raise ValidationError("limit must be a positive integer")

    users = session.exec(
        select(User)
        .order_by(User.problems_solved.desc(), User.attempts.asc(), User.id.asc())
        .limit(limit)
    ).all()
    return [standing_to_dict(user) for user in users]


def latest_leaderboard_week(session: Session) -> int:
    """Highest archived week, or 0 before the first rotation."""

    return session.exec(select(func.max(Leaderboard.week))).one() or 0


def snapshot_to_dict(snapshot: Leaderboard) -> Dict[str, Any]:
    return {
        "week": snapshot.week,
        "topPlayers": json.loads(snapshot.top_players_json or "[]"),
        "createdAt": snapshot.created_at.isoformat() if snapshot.created_at else None,
    }


def list_snapshots(session: Session) -> List[Dict[str, Any]]:
    snapshots = session.exec(select(Leaderboard).order_by(Leaderboard.week.desc())).all()
    return [snapshot_to_dict(snapshot) for snapshot in snapshots]


def get_snapshot(session: Session, week: int) -> Dict[str, Any]:
    snapshot = session.exec(select(Leaderboard).where(Leaderboard.week == week)).first()
    if snapshot is None:
        raise SnapshotNotFound()
    return snapshot_to_dict(snapshot)


__all__ = [
    "get_snapshot",
    "latest_leaderboard_week",
    "list_snapshots",
    "snapshot_to_dict",
    "standing_to_dict",
    "top_players",
]
