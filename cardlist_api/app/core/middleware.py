"""
HTTP middleware: request logging, security headers and server errors.

All three are registered by ``main.create_app``, innermost first.  The
innermost wrapper turns an exception escaping an endpoint into the
HTTP 500 response built by ``error_handlers``, so the security headers
and the access log line are applied to server errors as well.  Request
logging writes one line per request with method, path, status code and
duration.
"""

import logging
import time

from fastapi import FastAPI, Request

from .config import Settings
from .error_handlers import unhandled_error_response


logger = logging.getLogger("cardlist_api.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Attach server error, security header and request logging middleware to ``app``."""

    @app.middleware("http")
    async def server_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return unhandled_error_response(request, exc, settings)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
