"""
Exception Handlers

Shared by the dev server and the serverless app so that every locally
produced error carries the same envelope and CORS header.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from gamelayer_proxy.common.errors import AppError, NotFoundError
from gamelayer_proxy.common.proxy_headers import CORS_HEADERS

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach AppError, NotFoundError and catch-all handlers to an application"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """
        Handle application custom exceptions
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=CORS_HEADERS,
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        """Missing static file: plain-text body, like any static file server"""
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions

        The full error is logged; clients only get a generic message
        unless DEBUG is enabled.
        """
        logger.error(
            "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
            str(exc),
            request.url.path,
            traceback.format_exc(),
        )

        error = {
            "message": "Internal server error",
            "type": "internal_error",
            "code": "internal_error",
        }
        if app.state.settings.DEBUG:
            error["message"] = str(exc)
            error["type"] = type(exc).__name__

        return JSONResponse(
            status_code=500,
            content={"error": error},
            headers=CORS_HEADERS,
        )
