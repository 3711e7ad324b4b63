"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    LEADERBOARD_LIMIT,
    MAX_ATTEMPTS_PER_WEEK,
    PLACEHOLDER_ANSWER,
    PORT,
    ROTATION_CRON,
    ROTATION_ENABLED,
    SNAPSHOT_SIZE,
)
from .database import build_engine, check_connection, engine, get_session
from .time import utcnow

__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "DB_RESET",
    "LEADERBOARD_LIMIT",
    "MAX_ATTEMPTS_PER_WEEK",
    "PLACEHOLDER_ANSWER",
    "PORT",
    "ROTATION_CRON",
    "ROTATION_ENABLED",
    "SNAPSHOT_SIZE",
    "build_engine",
    "check_connection",
    "engine",
    "get_session",
    "utcnow",
]
