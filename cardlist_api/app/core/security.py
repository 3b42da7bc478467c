"""
Bearer token authentication.

Mutating endpoints depend on :func:`require_api_token`, which expects
the shared secret from ``settings.api_token`` in the ``Authorization``
header as ``Bearer <token>``.  Read‑only endpoints are public.  The
comparison is constant‑time to avoid leaking the token through
response timing.
"""

import hmac
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def require_api_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that rejects requests without the configured bearer token.

    Raises HTTP 401 when the header is missing, uses a scheme other
    than ``Bearer`` or carries the wrong token.  The rejected path is
    logged so that misconfigured clients show up in the log file.
    """
    token = credentials.credentials if credentials is not None else ""
    if not token or not hmac.compare_digest(token.encode("utf-8"), settings.api_token.encode("utf-8")):
        logger.error("Unauthorized request to path: %s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized request",
            headers={"WWW-Authenticate": "Bearer"},
        )
