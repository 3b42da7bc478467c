"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from cardlist_api.app.services.integrity_service import IntegrityService


def get_integrity_service(request: Request) -> IntegrityService:
    """Return the service bound to the running application's store."""
    return request.app.state.integrity_service
