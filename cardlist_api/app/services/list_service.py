"""
Service layer for lists.

Provides create, read and delete operations over the list collection
of a ``MemoryStore``, plus :meth:`ListService.remove_card_reference`,
which strips a card identifier from every list.  This service never
checks whether the card identifiers it stores exist; that check belongs
to ``IntegrityService.create_list``.
"""

import logging
from typing import List, Optional, Sequence

from cardlist_api.app.core.errors import NotFoundError, ValidationError
from cardlist_api.app.core.store import MemoryStore, Record, new_id
from cardlist_api.app.schemas.card_list import ListRead


logger = logging.getLogger(__name__)


class ListService:
    """Service class for managing lists."""

    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    def list_lists(self) -> List[ListRead]:
        """Return every list in insertion order."""
        with self.store.transaction() as store:
            return [self._record_to_list_read(record) for record in store.lists.values()]

    def get_list(self, list_id: str) -> ListRead:
        """Retrieve a single list by its ID.

        Raises ``NotFoundError`` if no list has this identifier.
        """
        with self.store.transaction() as store:
            record = store.lists.get(list_id)
            if record is None:
                logger.error("List with id %s not found.", list_id)
                raise NotFoundError("List", list_id)
            return self._record_to_list_read(record)

    def create_list(self, header: Optional[str], card_ids: Optional[Sequence[str]] = None) -> ListRead:
        """Insert a new list and return the created record.

        ``card_ids`` is stored as given, duplicates included.  A missing
        sequence is stored as an empty list.
        """
        if not header:
            logger.error("Header is required")
            raise ValidationError("Header is required")
        with self.store.transaction() as store:
            list_id = new_id(store.lists)
            record = {"id": list_id, "header": header, "card_ids": list(card_ids or [])}
            store.lists[list_id] = record
            logger.info("List with id %s created", list_id)
            return self._record_to_list_read(record)

    def delete_list(self, list_id: str) -> None:
        """Delete a list by ID.  Cards referenced by it are left alone.

        Raises ``NotFoundError`` if the list does not exist.
        """
        with self.store.transaction() as store:
            if store.lists.pop(list_id, None) is None:
                logger.error("List with id %s not found.", list_id)
                raise NotFoundError("List", list_id)
            logger.info("List with id %s deleted.", list_id)

    def remove_card_reference(self, card_id: str) -> int:
        """Remove every occurrence of ``card_id`` from every list.

        The relative order of the remaining identifiers is preserved.
        Returns the number of lists that changed; zero when no list
        referenced the card.
        """
        changed = 0
        with self.store.transaction() as store:
            for record in store.lists.values():
                if card_id not in record["card_ids"]:
                    continue
                record["card_ids"] = [cid for cid in record["card_ids"] if cid != card_id]
                changed += 1
        if changed:
            logger.info("Removed card %s from %d list(s)", card_id, changed)
        return changed

    @staticmethod
    def _record_to_list_read(record: Record) -> ListRead:
        """Convert a stored record to a ListRead schema instance."""
        return ListRead(id=record["id"], header=record["header"], card_ids=list(record["card_ids"]))
