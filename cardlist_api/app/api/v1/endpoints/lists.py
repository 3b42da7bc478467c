"""
List endpoints for API v1.

Anyone may list and retrieve lists; creating and deleting lists
requires the API token.  A list can only be created when every card it
references exists.  Deleting a list never deletes its cards.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from cardlist_api.app.api.deps import get_integrity_service
from cardlist_api.app.core.config import Settings
from cardlist_api.app.core.errors import NotFoundError, ValidationError
from cardlist_api.app.core.security import get_settings, require_api_token
from cardlist_api.app.schemas.card_list import ListCreate, ListCreated, ListRead
from cardlist_api.app.services.integrity_service import IntegrityService

router = APIRouter()


@router.get("/list", response_model=List[ListRead])
async def list_lists(service: IntegrityService = Depends(get_integrity_service)) -> List[ListRead]:
    """Return all lists in creation order."""
    return service.list_lists()


@router.get("/list/{list_id}", response_model=ListRead)
async def get_list(list_id: str, service: IntegrityService = Depends(get_integrity_service)) -> ListRead:
    """Retrieve a single list by ID.

    Returns HTTP 404 if the list is not found.
    """
    try:
        return service.get_list(list_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="List Not Found")


@router.post(
    "/list",
    response_model=ListCreated,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_token)],
)
async def create_list(
    list_in: ListCreate,
    response: Response,
    service: IntegrityService = Depends(get_integrity_service),
    settings: Settings = Depends(get_settings),
) -> ListCreated:
    """Create a new list.

    Returns HTTP 400 if any of ``cardIds`` does not name an existing
    card; in that case nothing is created.  The response body carries
    only the new list's ID, and ``Location`` points at the list.
    """
    try:
        created = service.create_list(list_in.header, list_in.card_ids)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    response.headers["Location"] = f"{settings.base_url.rstrip('/')}/list/{created.id}"
    return ListCreated(id=created.id)


@router.delete(
    "/list/{list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_api_token)],
)
async def delete_list(list_id: str, service: IntegrityService = Depends(get_integrity_service)) -> None:
    """Delete a list.  The cards it references are kept."""
    try:
        service.delete_list(list_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return None
