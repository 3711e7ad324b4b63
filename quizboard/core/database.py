"""Database configuration and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import DATABASE_URL

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DATA_DIR = _PROJECT_ROOT / "data"


def _default_url() -> str:
    _DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{_DATA_DIR / 'app.db'}"


def build_engine(url: str) -> Engine:
    """Create an engine; SQLite connections are shared across worker threads."""

    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(DATABASE_URL or _default_url())


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


def check_connection(bind: Engine) -> None:
    """Round-trip a trivial query, raising if the store is unreachable."""

    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))


__all__ = ["build_engine", "check_connection", "engine", "get_session"]
