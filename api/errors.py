"""
Centralized error reporting.

Anything a route does not turn into a response itself ends up here and the
client gets a generic 500.  Starlette re-raises unhandled exceptions after
the ``Exception`` handler runs so the server logs their traceback; that
handler only logs the request line.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from auth.errors import AuthServiceError

logger = logging.getLogger(__name__)

_INTERNAL_ERROR = {"error": "Internal server error"}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the app-level exception handlers."""

    @app.exception_handler(AuthServiceError)
    async def auth_service_error(request: Request, exc: AuthServiceError) -> JSONResponse:
        logger.error(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc,
            exc_info=exc,
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=_INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path,
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=_INTERNAL_ERROR)
