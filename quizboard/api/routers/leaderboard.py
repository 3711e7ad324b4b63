"""Leaderboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from ...core import LEADERBOARD_LIMIT, get_session
from ...services.leaderboard import get_snapshot, list_snapshots, top_players

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    limit: int = Query(LEADERBOARD_LIMIT, ge=1, le=100),
    session: Session = Depends(get_session),
):
    """Current standings, best first."""

    return top_players(session, limit)


@router.get("/leaderboard/history")
def get_leaderboard_history(session: Session = Depends(get_session)):
    """Archived weekly snapshots, newest first."""

    return list_snapshots(session)


@router.get("/leaderboard/history/{week}")
def get_leaderboard_week(week: int, session: Session = Depends(get_session)):
    """Archived snapshot for a single week."""

    return get_snapshot(session, week)


__all__ = ["router"]
