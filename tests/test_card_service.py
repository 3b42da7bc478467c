"""Card Service: create, read and delete over the in-memory store.

Invariants:
    - Cards are listed in creation order
    - Identifiers are unique among live cards
    - Empty or missing title/content is rejected and nothing is stored
    - Deleting a card never touches lists
"""

import pytest

from cardlist_api.app.core.errors import NotFoundError, ValidationError
from cardlist_api.app.services.card_service import CardService
from cardlist_api.app.services.list_service import ListService


@pytest.fixture
def cards(store):
    return CardService(store)


def test_create_returns_card_with_generated_id(cards):
    card = cards.create_card("Task One", "This is card one")

    assert card.id
    assert card.title == "Task One"
    assert card.content == "This is card one"
    assert cards.get_card(card.id) == card


def test_list_preserves_insertion_order(cards):
    created = [cards.create_card(f"T{i}", f"C{i}") for i in range(5)]

    assert [c.id for c in cards.list_cards()] == [c.id for c in created]


def test_identifiers_are_unique(cards):
    ids = {cards.create_card("t", "c").id for _ in range(200)}

    assert len(ids) == 200


@pytest.mark.parametrize(
    "title, content",
    [("", "body"), (None, "body"), ("title", ""), ("title", None)],
)
def test_create_rejects_missing_fields(cards, store, title, content):
    with pytest.raises(ValidationError):
        cards.create_card(title, content)

    assert store.counts()["cards"] == 0


def test_get_unknown_card_raises_not_found(cards):
    with pytest.raises(NotFoundError) as exc_info:
        cards.get_card("missing")

    assert exc_info.value.entity == "Card"
    assert exc_info.value.entity_id == "missing"


def test_delete_twice_succeeds_once(cards):
    card = cards.create_card("t", "c")

    cards.delete_card(card.id)
    with pytest.raises(NotFoundError):
        cards.delete_card(card.id)

    assert cards.list_cards() == []


def test_delete_does_not_touch_lists(cards, store):
    lists = ListService(store)
    card = cards.create_card("t", "c")
    card_list = lists.create_list("H", [card.id])

    cards.delete_card(card.id)

    assert lists.get_list(card_list.id).card_ids == [card.id]


def test_returned_cards_are_copies(cards, store):
    card = cards.create_card("t", "c")
    card.title = "changed"

    assert store.cards[card.id]["title"] == "t"
