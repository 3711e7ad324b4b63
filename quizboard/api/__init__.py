"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..core.errors import QuizError
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def _quiz_error_handler(request: Request, exc: QuizError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure while handling %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Internal server error"}, status_code=500)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)
    app.add_exception_handler(QuizError, _quiz_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)


__all__ = ["register_routes"]
