"""
Error types and HTTP exception handlers.

``RecordNotFound`` is the only domain error raised by the stores.  The
handlers registered by :func:`register_exception_handlers` translate it
into a ``404`` response with a ``{"message": "<Entity> not found"}``
body, and turn any other uncaught exception into a generic ``500``
response so that a faulty handler never takes the server down.  The
exception text is only exposed in development mode.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from crud_api.app.schemas.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors raised by the application."""


class RecordNotFound(ApiError):
    """Raised when no record matches the requested identifier."""

    def __init__(self, entity: str, record_id: Any = None) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


def register_exception_handlers(app: FastAPI, expose_errors: bool = False) -> None:
    """Attach the application's exception handlers to ``app``.

    Parameters
    ----------
    app : FastAPI
        Application to configure.
    expose_errors : bool
        When true, the text of unexpected exceptions is included in the
        ``error`` field of ``500`` responses.  Otherwise an empty object
        is returned in its place.
    """

    @app.exception_handler(RecordNotFound)
    async def record_not_found_handler(request: Request, exc: RecordNotFound) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=MessageResponse(message=exc.message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        detail: Optional[Any] = str(exc) if expose_errors else {}
        body = ErrorResponse(message="Something went wrong!", error=detail)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
