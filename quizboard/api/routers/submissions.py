"""Answer submission endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.problems import active_week
from ...services.submissions import submit_answer
from ...services.validation import require_mapping

router = APIRouter(tags=["submissions"])


@router.post("/submit")
def submit(body: Any = Body(None), session: Session = Depends(get_session)):
    """Score an answer for the given week."""

    body = require_mapping(body)
    result = submit_answer(
        session,
        name=body.get("name"),
        email=body.get("email"),
        answer=body.get("answer"),
        week=body.get("week"),
    )
    return {"message": "Response submitted", **result}


@router.get("/week")
def get_active_week(session: Session = Depends(get_session)):
    """Week of the most recently published problem."""

    return {"week": active_week(session)}


__all__ = ["router"]
