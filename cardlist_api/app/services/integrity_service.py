"""
Service coordinating cards and lists.

``IntegrityService`` is the single entry point used by the API layer.
It owns no records; it wraps a ``CardService`` and a ``ListService``
built over the same ``MemoryStore`` and enforces the invariants that
span both collections:

* a list can only be created when every card identifier it references
  names an existing card.  If any identifier is unknown nothing is
  stored;
* deleting a card removes its identifier from every list in the same
  critical section, so no reader ever sees a list pointing at a card
  that no longer exists.

Deleting every card a list references leaves an empty list behind;
lists are never removed as a side effect.
"""

import logging
from typing import List, Optional, Sequence

from cardlist_api.app.core.errors import MissingCardsError, ValidationError
from cardlist_api.app.core.store import MemoryStore
from cardlist_api.app.schemas.card import CardRead
from cardlist_api.app.schemas.card_list import ListRead
from cardlist_api.app.services.card_service import CardService
from cardlist_api.app.services.list_service import ListService


logger = logging.getLogger(__name__)


class IntegrityService:
    """Coordinates card and list operations over one store."""

    def __init__(self, store: MemoryStore) -> None:
        self.store = store
        self.cards = CardService(store)
        self.lists = ListService(store)

    # ------------------------------------------------------------------
    # Card operations
    # ------------------------------------------------------------------
    def list_cards(self) -> List[CardRead]:
        return self.cards.list_cards()

    def get_card(self, card_id: str) -> CardRead:
        return self.cards.get_card(card_id)

    def create_card(self, title: Optional[str], content: Optional[str]) -> CardRead:
        return self.cards.create_card(title, content)

    def delete_card(self, card_id: str) -> None:
        """Delete a card and strip it from every list.

        Raises ``NotFoundError`` if the card does not exist, in which
        case no list is touched.
        """
        with self.store.transaction():
            self.cards.delete_card(card_id)
            self.lists.remove_card_reference(card_id)

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------
    def list_lists(self) -> List[ListRead]:
        return self.lists.list_lists()

    def get_list(self, list_id: str) -> ListRead:
        return self.lists.get_list(list_id)

    def create_list(self, header: Optional[str], card_ids: Optional[Sequence[str]] = None) -> ListRead:
        """Create a list after checking that every referenced card exists.

        The header is checked first so that a list with both a missing
        header and unknown cards reports the header.  Unknown card
        identifiers raise ``MissingCardsError`` listing each of them
        once, and no list is created.
        """
        if not header:
            logger.error("Header is required")
            raise ValidationError("Header is required")
        card_ids = list(card_ids or [])
        with self.store.transaction():
            missing = [cid for cid in dict.fromkeys(card_ids) if not self.cards.exists(cid)]
            if missing:
                for cid in missing:
                    logger.error("Card with id %s not found in cards.", cid)
                raise MissingCardsError(missing)
            return self.lists.create_list(header, card_ids)

    def delete_list(self, list_id: str) -> None:
        self.lists.delete_list(list_id)

    def seed_demo_data(self) -> ListRead:
        """Create the sample card and a list holding it."""
        card = self.create_card("Task One", "This is card one")
        demo = self.create_list("List One", [card.id])
        logger.info("Seeded demo card %s and list %s", card.id, demo.id)
        return demo
