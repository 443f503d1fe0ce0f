"""
Exception handlers.

Renders AskPdfException subclasses as ErrorResponse bodies with the status
each class carries, maps request validation failures to 400, and turns any
other exception into a logged 500.

Dependencies: fastapi, askpdf.core.exceptions, askpdf.models.common
System role: HTTP error mapping
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from askpdf.core.exceptions import AskPdfException
from askpdf.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(exc: AskPdfException, fallback_answer: str | None = None) -> JSONResponse:
    """Build the JSON error body for a domain exception."""
    body = ErrorResponse(
        message=exc.message,
        error=type(exc).__name__,
        details=exc.details or None,
        fallback_answer=fallback_answer,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def handle_domain_error(request: Request, exc: AskPdfException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} - {type(exc).__name__}",
            exc_info=exc,
            extra={"error_type": type(exc).__name__, "details": exc.details},
        )
    else:
        logger.info(
            f"{request.method} {request.url.path} - {exc.status_code}",
            extra={"error_type": type(exc).__name__, "error_msg": exc.message},
        )
    return error_response(exc)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(
        message="Invalid request",
        error="ValidationError",
        details={"errors": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
        ]},
    )
    return JSONResponse(
        status_code=400,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path} - Unhandled exception",
        exc_info=exc,
        extra={"error_type": type(exc).__name__},
    )
    body = ErrorResponse(message="Internal server error", error=type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AskPdfException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
