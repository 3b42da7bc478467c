"""
Root and health endpoints.

``GET /`` answers with a plain text greeting so that a browser pointed at the
service shows something.  ``GET /health`` reports the number of live
cards and lists and is meant for load balancer checks.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from cardlist_api.app.api.deps import get_integrity_service
from cardlist_api.app.services.integrity_service import IntegrityService

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Hello, world!"


@router.get("/health", response_model=Dict[str, Any])
async def health(service: IntegrityService = Depends(get_integrity_service)) -> Dict[str, Any]:
    return {"status": "ok", **service.store.counts()}
