"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers.  The card and list
routers define their own ``/card`` and ``/list`` paths internally, so
no prefix is given here.
"""

from fastapi import APIRouter

from .endpoints import cards, health, lists

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(cards.router, tags=["cards"])
router.include_router(lists.router, tags=["lists"])
