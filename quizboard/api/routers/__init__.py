"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .leaderboard import router as leaderboard_router
from .submissions import router as submissions_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    submissions_router,
    leaderboard_router,
    admin_router,
)

__all__ = ["ALL_ROUTERS"]
