"""
Service layer for cards.

Provides create, read and delete operations over the card collection
of a ``MemoryStore``.  Cards have no update operation.  Deleting a card
here does not touch lists; removing the card from lists is the job of
``IntegrityService.delete_card``.
"""

import logging
from typing import List, Optional

from cardlist_api.app.core.errors import NotFoundError, ValidationError
from cardlist_api.app.core.store import MemoryStore, Record, new_id
from cardlist_api.app.schemas.card import CardRead


logger = logging.getLogger(__name__)


class CardService:
    """Service class for managing cards."""

    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    def list_cards(self) -> List[CardRead]:
        """Return every card in insertion order."""
        with self.store.transaction() as store:
            return [self._record_to_card_read(record) for record in store.cards.values()]

    def get_card(self, card_id: str) -> CardRead:
        """Retrieve a single card by its ID.

        Raises ``NotFoundError`` if no card has this identifier.
        """
        with self.store.transaction() as store:
            record = store.cards.get(card_id)
            if record is None:
                logger.error("Card with id %s not found.", card_id)
                raise NotFoundError("Card", card_id)
            return self._record_to_card_read(record)

    def exists(self, card_id: str) -> bool:
        with self.store.transaction() as store:
            return card_id in store.cards

    def create_card(self, title: Optional[str], content: Optional[str]) -> CardRead:
        """Insert a new card and return the created record.

        Both ``title`` and ``content`` are required and must be
        non‑empty.  The identifier is generated here.
        """
        if not title:
            logger.error("Title is required")
            raise ValidationError("Title is required")
        if not content:
            logger.error("Content is required")
            raise ValidationError("Content is required")
        with self.store.transaction() as store:
            card_id = new_id(store.cards)
            record = {"id": card_id, "title": title, "content": content}
            store.cards[card_id] = record
            logger.info("Card with id %s created", card_id)
            return self._record_to_card_read(record)

    def delete_card(self, card_id: str) -> None:
        """Delete a card by ID.

        Raises ``NotFoundError`` if the card does not exist.
        """
        with self.store.transaction() as store:
            if store.cards.pop(card_id, None) is None:
                logger.error("Card with id %s not found.", card_id)
                raise NotFoundError("Card", card_id)
            logger.info("Card with id %s deleted.", card_id)

    @staticmethod
    def _record_to_card_read(record: Record) -> CardRead:
        """Convert a stored record to a CardRead schema instance."""
        return CardRead(id=record["id"], title=record["title"], content=record["content"])
