"""
In‑memory storage for cards and lists.

The ``MemoryStore`` holds both collections and the single lock that
guards them.  One store is created per application (see
``main.create_app``) and handed to the services; nothing in the
package keeps collections at module level.  Records are plain
dictionaries keyed by identifier, and dictionary insertion order is the
order in which entities are listed.

Every read and write goes through :meth:`MemoryStore.transaction`.  The
lock is re‑entrant so that the integrity service can hold it across a
compound operation while the card and list services it calls acquire
it again.  Nothing done under the lock blocks or suspends.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Any, Container, Dict, Iterator

from .errors import IntegrityError


Record = Dict[str, Any]

# Attempts at drawing an unused identifier before giving up.
_MAX_ID_ATTEMPTS = 3


def new_id(existing: Container[str] = ()) -> str:
    """Return a fresh random identifier not present in ``existing``.

    Raises ``IntegrityError`` if every attempt collides.
    """
    for _ in range(_MAX_ID_ATTEMPTS):
        candidate = str(uuid.uuid4())
        if candidate not in existing:
            return candidate
    raise IntegrityError("Could not generate a unique id")


class MemoryStore:
    """Process‑local storage shared by the card and list services."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._cards: Dict[str, Record] = {}
        self._lists: Dict[str, Record] = {}

    @contextmanager
    def transaction(self) -> Iterator["MemoryStore"]:
        """Context manager that holds the store lock for its duration."""
        with self._lock:
            yield self

    @property
    def cards(self) -> Dict[str, Record]:
        return self._cards

    @property
    def lists(self) -> Dict[str, Record]:
        return self._lists

    def counts(self) -> Dict[str, int]:
        """Return the number of live cards and lists."""
        with self._lock:
            return {"cards": len(self._cards), "lists": len(self._lists)}
