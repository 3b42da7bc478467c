"""Root conftest: shared test configuration."""

import os

# Settings are read at import time; keep tests off the log file and use
# a known token.
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("API_TOKEN", "test-token")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient

from cardlist_api.app.core.config import Settings
from cardlist_api.app.core.store import MemoryStore
from cardlist_api.app.main import create_app
from cardlist_api.app.services.integrity_service import IntegrityService

TOKEN = "test-token"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def service(store):
    return IntegrityService(store)


@pytest.fixture
def settings():
    return Settings(api_token=TOKEN, log_file="", base_url="http://testserver", seed_demo_data=False)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth():
    return {"Authorization": f"Bearer {TOKEN}"}
