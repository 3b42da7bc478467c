"""API Client: request building, error tuples and endpoint discovery.

The requests session is replaced with a MagicMock, so no network is used.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from cardlist_api.client import ApiEndpoint, CardListAPI


def _response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.content = json.dumps(body).encode() if body is not None else b""
    response.json.return_value = body
    response.text = response.content.decode()
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return CardListAPI(base_url="http://api.local/", api_key="secret", session=session)


def test_create_card_posts_body_with_token(api, session):
    session.request.return_value = _response(201, {"id": "1", "title": "t", "content": "c"})

    card, error = api.create_card("t", "c")

    assert error is None
    assert card["id"] == "1"
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://api.local/card"
    assert kwargs["json"] == {"title": "t", "content": "c"}
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}


def test_create_list_sends_card_ids(api, session):
    session.request.return_value = _response(201, {"id": "L"})

    data, error = api.create_list("H", ["a", "a"])

    assert (data, error) == ({"id": "L"}, None)
    assert session.request.call_args.kwargs["json"] == {"header": "H", "cardIds": ["a", "a"]}


def test_get_card_substitutes_id(api, session):
    session.request.return_value = _response(200, {"id": "abc"})

    api.get_card("abc")

    assert session.request.call_args.kwargs["url"] == "http://api.local/card/abc"


def test_delete_returns_true_on_204(api, session):
    session.request.return_value = _response(204)

    assert api.delete_list("L") == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_http_error_is_returned_as_tuple(api, session):
    session.request.return_value = _response(404, {"detail": "Card Not Found"})

    ok, error = api.delete_card("gone")

    assert ok is False
    assert error == {"status_code": 404, "message": "Card Not Found"}


def test_connection_error_is_returned_as_tuple(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    cards, error = api.list_cards()

    assert cards == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_discover_maps_tagged_paths(api, session):
    spec = {
        "paths": {
            "/v2/cards": {"get": {"tags": ["cards"]}},
            "/v2/cards/{card_id}": {"get": {"tags": ["cards"]}, "delete": {"tags": ["cards"]}},
            "/v2/lists": {"get": {"tags": ["lists"]}},
        }
    }
    session.request.return_value = _response(200, spec)

    assert api.discover() is None

    session.request.return_value = _response(204)
    api.delete_card("xyz")
    assert session.request.call_args.kwargs["url"] == "http://api.local/v2/cards/xyz"
    # Categories without a POST keep nothing to fall back on once discovered.
    assert api.create_card("t", "c")[1]["status_code"] is None


def test_openapi_file_is_used(tmp_path, session):
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps({"paths": {"/items": {"get": {"tags": ["Lists"]}}}}))

    api = CardListAPI(base_url="http://api.local", openapi_path=str(path), session=session)

    assert api.endpoints["lists"] == [ApiEndpoint(path="/items", method="GET")]
    assert api.endpoints["cards"][0].path == "/card"


def test_unreadable_openapi_file_falls_back_to_defaults(tmp_path, session):
    path = tmp_path / "openapi.json"
    path.write_text("{not json")

    api = CardListAPI(base_url="http://api.local", openapi_path=str(path), session=session)

    assert [ep.path for ep in api.endpoints["lists"]] == ["/list", "/list", "/list/{id}", "/list/{id}"]
