"""Card/List API client.

This module defines a small client wrapper around the Card/List REST
API.  It can read the service's OpenAPI document (a local file or the
``/openapi.json`` served by the application) to discover endpoint
paths.  If the document is not available, the client falls back to the
conventional ``/card`` and ``/list`` paths.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes high‑level methods for every operation:

* :meth:`list_cards`, :meth:`get_card`, :meth:`create_card`,
  :meth:`delete_card`
* :meth:`list_lists`, :meth:`get_list`, :meth:`create_list`,
  :meth:`delete_list`

Each method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``error`` is a dictionary with ``status_code`` and
``message`` keys.  Mutating calls need the API token, passed as
``api_key``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/card`` or ``/card/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None

    @property
    def has_id(self) -> bool:
        return "{" in self.path

    def format(self, entity_id: Any) -> str:
        """Substitute ``entity_id`` for the path's single placeholder."""
        start, end = self.path.find("{"), self.path.find("}")
        return f"{self.path[:start]}{entity_id}{self.path[end + 1:]}"


class CardListAPI:
    """Client for interacting with the Card/List API."""

    # OpenAPI tags that map onto the client's resource categories.
    _KNOWN_TAGS = {
        "cards": "cards",
        "card": "cards",
        "lists": "lists",
        "list": "lists",
    }

    _DEFAULT_ENDPOINTS: Dict[str, List[Tuple[str, str]]] = {
        "cards": [("GET", "/card"), ("POST", "/card"), ("GET", "/card/{id}"), ("DELETE", "/card/{id}")],
        "lists": [("GET", "/list"), ("POST", "/list"), ("GET", "/list/{id}"), ("DELETE", "/list/{id}")],
    }

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            openapi_path: Optional path to an OpenAPI JSON file.  If
                provided and readable, endpoints will be inferred from it.
            api_key: Optional API token, sent as ``Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.endpoints: Dict[str, List[ApiEndpoint]] = {category: [] for category in self._DEFAULT_ENDPOINTS}
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self._discover_endpoints(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load or parse OpenAPI specification %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )
        self._ensure_default_endpoints()

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def discover(self) -> Optional[Error]:
        """Fetch ``/openapi.json`` from the server and re‑map endpoints."""
        spec, error = self._request("GET", "/openapi.json")
        if error:
            return error
        if isinstance(spec, dict):
            self.endpoints = {category: [] for category in self._DEFAULT_ENDPOINTS}
            self._discover_endpoints(spec)
            self._ensure_default_endpoints()
        return None

    def _discover_endpoints(self, spec: Dict[str, Any]) -> None:
        """Record every operation whose tags match a known category."""
        for path, methods in spec.get("paths", {}).items():
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                for tag in (t.lower() for t in op.get("tags", [])):
                    category = self._KNOWN_TAGS.get(tag)
                    if category:
                        self.endpoints[category].append(
                            ApiEndpoint(path=path, method=method_lower.upper(), operation_id=op.get("operationId"))
                        )

    def _ensure_default_endpoints(self) -> None:
        for category, ep_list in self._DEFAULT_ENDPOINTS.items():
            if not self.endpoints.get(category):
                self.endpoints[category] = [ApiEndpoint(path=path, method=method) for method, path in ep_list]

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns a tuple ``(data, error)``.  ``data`` is the parsed JSON
        body (``None`` for empty bodies such as HTTP 204).
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(self, category: str, method: str, entity_id: Any = None, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self._pick_endpoint(category, method, has_id=entity_id is not None)
        if not ep:
            logger.warning("No %s endpoint available for %s", method, category)
            return None, {"status_code": None, "message": f"No {method} endpoint for {category}"}
        path = ep.format(entity_id) if entity_id is not None else ep.path
        return self._request(ep.method, path, json_body=json_body)

    def _pick_endpoint(self, category: str, method: str, *, has_id: bool) -> Optional[ApiEndpoint]:
        """Select the first endpoint in ``category`` matching method and id placeholder."""
        method_upper = method.upper()
        for ep in self.endpoints.get(category, []):
            if ep.method == method_upper and ep.has_id == has_id:
                return ep
        return None

    # ------------------------------------------------------------------
    # Card operations
    # ------------------------------------------------------------------
    def list_cards(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call("cards", "GET")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_card(self, card_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("cards", "GET", card_id)

    def create_card(self, title: str, content: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("cards", "POST", json_body={"title": title, "content": content})

    def delete_card(self, card_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a card.  The server also removes it from every list."""
        _, error = self._call("cards", "DELETE", card_id)
        return error is None, error

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------
    def list_lists(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call("lists", "GET")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_list(self, list_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("lists", "GET", list_id)

    def create_list(self, header: str, card_ids: Optional[Sequence[str]] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a list.  On success ``data`` is ``{"id": <new list id>}``."""
        return self._call("lists", "POST", json_body={"header": header, "cardIds": list(card_ids or [])})

    def delete_list(self, list_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._call("lists", "DELETE", list_id)
        return error is None, error
