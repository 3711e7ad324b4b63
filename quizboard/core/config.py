"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Return an integer environment variable or raise an error."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
DATABASE_URL = os.getenv("DATABASE_URL", "")
DB_RESET = _env_bool("DB_RESET", False)


# Cross-origin access --------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN", "http://localhost:3000"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

ALLOWED_CORS_ORIGINS = _unique([*_frontend_origins, *_additional_origins])


# Quiz rules -----------------------------------------------------------------
MAX_ATTEMPTS_PER_WEEK = _env_int("MAX_ATTEMPTS_PER_WEEK", 3)
LEADERBOARD_LIMIT = _env_int("LEADERBOARD_LIMIT", 10)
SNAPSHOT_SIZE = _env_int("SNAPSHOT_SIZE", 3)
PLACEHOLDER_ANSWER = os.getenv("PLACEHOLDER_ANSWER", "NewAnswerHere")


# Weekly rotation ------------------------------------------------------------
ROTATION_ENABLED = _env_bool("ROTATION_ENABLED", True)
# Sunday at midnight UTC.
ROTATION_CRON = os.getenv("ROTATION_CRON", "0 0 * * sun")


# Admin access ---------------------------------------------------------------
ADMIN_USER = os.getenv("ADMIN_USER", "admin")
ADMIN_PASS = os.getenv("ADMIN_PASS", "")


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = _env_int("PORT", 7000)


__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "LEADERBOARD_LIMIT",
    "LOG_LEVEL",
    "MAX_ATTEMPTS_PER_WEEK",
    "PLACEHOLDER_ANSWER",
    "PORT",
    "ROTATION_CRON",
    "ROTATION_ENABLED",
    "SNAPSHOT_SIZE",
]
