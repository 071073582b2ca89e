"""Error Handlers — every failure leaves the API as a FolioError envelope.

Invariants:
    - Pydantic RequestValidationError becomes RequestValidationFailedError (400)
      with field-level details
    - Any other unhandled exception becomes InternalError (500); its text is logged,
      never returned
    - One responder logs and renders all three, so every error log line carries
      error_code, path, resource_id and operation when the error knows them

Design Decisions:
    - Log level follows the outcome: a missing portfolio or career entry is INFO,
      other 4xx (main portfolio delete, bad period, bad body) WARNING, 5xx ERROR
    - Extracted from main.py: main only wires, handlers live here
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    ErrorCategory, FolioError, InternalError, RequestValidationFailedError,
)

logger = logging.getLogger(__name__)


def _log_level(error: FolioError) -> int:
    if error.http_status >= 500:
        return logging.ERROR
    if error.category == ErrorCategory.RESOURCE_NOT_FOUND:
        return logging.INFO
    return logging.WARNING


def _respond(request: Request, error: FolioError, exc_info=None) -> JSONResponse:
    logger.log(
        _log_level(error),
        f"{request.method} {request.url.path} -> {error.http_status} {error.code}: {error.message}",
        exc_info=exc_info,
        extra={
            "error_code": error.code,
            "path": request.url.path,
            "resource_id": error.context.resource_id,
            "operation": error.context.operation,
        },
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Register the global handlers on the FastAPI app."""

    @app.exception_handler(FolioError)
    async def folio_error_handler(request: Request, exc: FolioError):
        return _respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _respond(request, RequestValidationFailedError(_validation_details(exc)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        return _respond(
            request, InternalError(), exc_info=(type(exc), exc, exc.__traceback__),
        )
