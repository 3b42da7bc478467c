"""
Card endpoints for API v1.

Anyone may list and retrieve cards; creating and deleting cards
requires the API token.  Deleting a card also removes it from every
list that references it.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from cardlist_api.app.api.deps import get_integrity_service
from cardlist_api.app.core.config import Settings
from cardlist_api.app.core.errors import NotFoundError, ValidationError
from cardlist_api.app.core.security import get_settings, require_api_token
from cardlist_api.app.schemas.card import CardCreate, CardRead
from cardlist_api.app.services.integrity_service import IntegrityService

router = APIRouter()


@router.get("/card", response_model=List[CardRead])
async def list_cards(service: IntegrityService = Depends(get_integrity_service)) -> List[CardRead]:
    """Return all cards in creation order."""
    return service.list_cards()


@router.get("/card/{card_id}", response_model=CardRead)
async def get_card(card_id: str, service: IntegrityService = Depends(get_integrity_service)) -> CardRead:
    """Retrieve a single card by ID.

    Returns HTTP 404 if the card is not found.
    """
    try:
        return service.get_card(card_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card Not Found")


@router.post(
    "/card",
    response_model=CardRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_token)],
)
async def create_card(
    card_in: CardCreate,
    response: Response,
    service: IntegrityService = Depends(get_integrity_service),
    settings: Settings = Depends(get_settings),
) -> CardRead:
    """Create a new card.

    The ``Location`` header of the response points at the new card.
    """
    try:
        card = service.create_card(card_in.title, card_in.content)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    response.headers["Location"] = f"{settings.base_url.rstrip('/')}/card/{card.id}"
    return card


@router.delete(
    "/card/{card_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_api_token)],
)
async def delete_card(card_id: str, service: IntegrityService = Depends(get_integrity_service)) -> None:
    """Delete a card and remove it from every list."""
    try:
        service.delete_card(card_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return None
