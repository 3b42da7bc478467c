"""
Global exception handlers.

Three layers are registered on the application:

* ``CardListError`` raised past an endpoint is rendered with the
  error's own status code and message.
* ``RequestValidationError`` (malformed JSON, missing ``title`` and so
  on) is reported as HTTP 400 instead of FastAPI's default 422.
* Any other exception becomes HTTP 500.  In production the body is a
  generic message; otherwise it carries the exception text and type.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings
from .errors import CardListError


logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CardListError)
    async def card_list_error_handler(request: Request, exc: CardListError):
        if exc.http_status >= 500:
            logger.error("Invariant violation on %s: %s", request.url.path, exc.message)
            return server_error_response(exc, settings)
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid data on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                    }
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        return unhandled_error_response(request, exc, settings)


def unhandled_error_response(request: Request, exc: Exception, settings: Settings) -> JSONResponse:
    """Log an unexpected exception and build the HTTP 500 response for it."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return server_error_response(exc, settings)


def server_error_response(exc: Exception, settings: Settings) -> JSONResponse:
    if settings.is_production:
        content = {"detail": "server error"}
    else:
        content = {"detail": str(exc), "type": type(exc).__name__}
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
