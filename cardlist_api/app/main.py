"""
Main entrypoint for the Card/List API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn cardlist_api.app.main:app --reload

Each application owns exactly one ``MemoryStore``; every endpoint
reaches it through the ``IntegrityService`` kept on ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.error_handlers import register_error_handlers
from .core.logging_config import setup_logging
from .core.middleware import register_middleware
from .core.store import MemoryStore
from .services.integrity_service import IntegrityService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MemoryStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[MemoryStore]
        Store backing the application.  A fresh, empty store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log.  Console output is reserved for non‑production runs.
    setup_logging(settings.log_level, settings.log_file or None, console=not settings.is_production)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.integrity_service = IntegrityService(store if store is not None else MemoryStore())

    if settings.seed_demo_data:
        app.state.integrity_service.seed_demo_data()

    register_middleware(app, settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    register_error_handlers(app, settings)

    app.include_router(v1_router)

    logger.info("%s %s ready (%s)", settings.project_name, settings.api_version, settings.environment)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
