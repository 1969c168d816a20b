"""
Exception types and handler registration.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .adapters import BufferedResponse
from .utils import respond_error, respond_error_message, respond_message_and_log_error

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    """Raised by handlers to abort a request with a plain-text error response."""

    def __init__(self, detail: str, *, status_code: int = 500, message: Optional[str] = None) -> None:
        self.detail = detail
        self.status_code = status_code
        self.message = message
        super().__init__(detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach module exception handlers to the FastAPI app."""

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError) -> Response:
        response = BufferedResponse()
        if exc.message is not None:
            respond_message_and_log_error(response, exc, exc.message, exc.status_code, logger=logger)
        else:
            respond_error(response, exc, exc.status_code, logger=logger)
        return response.to_response()

    # Starlette's base class also covers routing errors such as 404 and 405.
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        response = BufferedResponse()
        for name, value in (exc.headers or {}).items():
            response.add_header(name, value)
        respond_error_message(response, str(exc.detail), exc.status_code, logger=logger)
        return response.to_response()
