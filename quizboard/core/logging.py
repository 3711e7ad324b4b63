"""Logging configuration helpers for the quiz service."""

from __future__ import annotations

import logging
from logging import Logger

from .config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> Logger:
    """Configure basic logging for the application and return its logger."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quizboard")


__all__ = ["configure_logging"]
