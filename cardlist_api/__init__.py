"""
Top‑level package for the Card/List API.

This file makes ``cardlist_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``cardlist_api.app.main``.  The HTTP client lives next to the
application in :mod:`cardlist_api.client`.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
