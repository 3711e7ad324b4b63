"""Background scheduling of the weekly rotation."""

from __future__ import annotations

import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..core import ROTATION_CRON
from ..core.database import engine
from ..core.errors import RotationInProgress
from .rotation import rotate_week

logger = logging.getLogger(__name__)

ROTATION_JOB_ID = "weekly-rotation"


def run_scheduled_rotation(bind: Optional[Engine] = None) -> None:
    """Job body: rotate with a fresh session, skipping if a rotation is running."""

    with Session(bind if bind is not None else engine) as session:
        try:
            rotate_week(session)
        except RotationInProgress:
            logger.warning("Skipping scheduled rotation: previous run still in progress")


def build_scheduler(cron: str = ROTATION_CRON) -> BackgroundScheduler:
    """Return an unstarted scheduler with the rotation job registered.

    ``cron`` uses APScheduler's crontab dialect, where numeric weekdays start
    at Monday; prefer names such as ``sun``.
    """

    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        run_scheduled_rotation,
        CronTrigger.from_crontab(cron, timezone="UTC"),
        id=ROTATION_JOB_ID,
        name="Weekly leaderboard rotation",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    return scheduler


__all__ = ["ROTATION_JOB_ID", "build_scheduler", "run_scheduled_rotation"]
