"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a production deployment
you should at least set ``API_TOKEN`` and ``ENVIRONMENT=production``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str = "") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Card List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # ``production`` hides internal error details from clients and
    # disables console logging; anything else is treated as development.
    environment: str = os.getenv("ENVIRONMENT", "development")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string disables the file handler.
    log_file: str = os.getenv("LOG_FILE", "info.log")

    # Shared secret expected as ``Authorization: Bearer <token>`` on every
    # mutating request.
    api_token: str = os.getenv("API_TOKEN", "change_me")

    # Prefix used to build ``Location`` headers for created resources.
    base_url: str = os.getenv("BASE_URL", "http://localhost:8000")

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Create the sample card and list at startup.
    seed_demo_data: bool = _env_bool("SEED_DEMO_DATA")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
