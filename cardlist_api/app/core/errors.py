"""
Domain errors raised by the service layer.

Services never raise ``HTTPException`` themselves; they raise one of
the errors below and the API layer translates them.  ``ValidationError``
and ``NotFoundError`` are expected outcomes of a bad request and are
never retried.  ``IntegrityError`` signals that an internal invariant
was broken and is reported as a server error.
"""

from typing import Iterable


class CardListError(Exception):
    """Base class for all errors raised by the card/list services."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CardListError):
    """A required field is missing or a list references an unknown card."""

    http_status = 400


class MissingCardsError(ValidationError):
    """A list was submitted with card identifiers that do not resolve."""

    def __init__(self, card_ids: Iterable[str]):
        self.card_ids = list(card_ids)
        super().__init__(f"Unknown card ids: {', '.join(self.card_ids)}")


class NotFoundError(CardListError):
    """No live entity has the requested identifier."""

    http_status = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class IntegrityError(CardListError):
    """An internal invariant of the store was violated."""
