"""Entry point for the Card/List API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as API_TOKEN, ENVIRONMENT, HOST and PORT is read
from environment variables; see ``cardlist_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from cardlist_api.app.core.config import settings
from cardlist_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host``/``settings.port``."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
