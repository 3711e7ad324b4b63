"""Administrative endpoints guarded by HTTP Basic credentials."""

from __future__ import annotations

import secrets
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlmodel import Session

from ...core import ADMIN_PASS, ADMIN_USER, get_session
from ...services.leaderboard import snapshot_to_dict
from ...services.problems import publish_problem
from ...services.rotation import rotate_week
from ...services.validation import require_mapping

router = APIRouter(prefix="/admin", tags=["admin"])

security = HTTPBasic()


def require_admin(credentials: HTTPBasicCredentials = Depends(security)) -> bool:
    # An empty ADMIN_PASS disables the admin routes entirely.
    ok_user = secrets.compare_digest(credentials.username.encode(), ADMIN_USER.encode())
    ok_pass = bool(ADMIN_PASS) and secrets.compare_digest(
        credentials.password.encode(), ADMIN_PASS.encode()
    )
    if not (ok_user and ok_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return True


@router.post("/rotate", dependencies=[Depends(require_admin)])
def trigger_rotation(session: Session = Depends(get_session)):
    """Run the weekly rotation immediately."""

    snapshot = rotate_week(session)
    return snapshot_to_dict(snapshot)


@router.post("/problems", dependencies=[Depends(require_admin)])
def create_problem(body: Any = Body(None), session: Session = Depends(get_session)):
    """Publish the answer key for a week."""

    body = require_mapping(body)
    problem = publish_problem(session, body.get("week"), body.get("correctAnswer"))
    return {"ok": True, "week": problem.week}


__all__ = ["router", "require_admin"]
