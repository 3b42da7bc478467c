"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Cards and lists each expose a router defined in
``api/v1/endpoints``; their business logic lives in ``services`` and
the shared in‑memory state in ``core.store``.
"""

from .main import app  # noqa: F401
