"""Pokemon catalog API client.

This module defines a small client wrapper around the catalog's REST
API.  The client uses the ``requests`` library internally and exposes
one method per operation:

* :meth:`list_pokemons` – fetch a page of Pokemon.
* :meth:`get_pokemon` – fetch a single Pokemon by its identifier.
* :meth:`create_pokemon` – create a new Pokemon.
* :meth:`update_pokemon` – change the name and/or type of a Pokemon.
* :meth:`remove_pokemon` – delete a Pokemon.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  The client
never raises for HTTP or network errors so callers can branch on the
result.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
catalog behind a gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PokemonCatalogClient:
    """Client for interacting with the Pokemon catalog API."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service including any global
                prefix, e.g. ``http://localhost:3000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(response, error)``.  ``response`` is the
            successful response; ``error`` describes the failure.
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
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = self._error_message(exc.response.json())
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(body: Any) -> str:
        # Error bodies carry either one message or a list of violations.
        if not isinstance(body, dict):
            return str(body)
        message = body.get("message") or body.get("detail") or ""
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        return str(message)

    # ------------------------------------------------------------------
    # Pokemon operations
    # ------------------------------------------------------------------
    def list_pokemons(self, limit: int = 10, page: int = 1) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of Pokemon."""
        response, error = self._request("GET", "/pokemons", params={"limit": limit, "page": page})
        if error:
            return [], error
        data = response.json()
        return (data if isinstance(data, list) else []), None

    def get_pokemon(self, pokemon_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single Pokemon by ID."""
        response, error = self._request("GET", f"/pokemons/{pokemon_id}")
        if error:
            return None, error
        return response.json(), None

    def create_pokemon(self, name: str, type_: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a Pokemon.  The server rejects duplicate names."""
        response, error = self._request("POST", "/pokemons", json_body={"name": name, "type": type_})
        if error:
            return None, error
        return response.json(), None

    def update_pokemon(self, pokemon_id: int, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update a Pokemon.

        Args:
            pokemon_id: Identifier of the Pokemon.
            **fields: ``name`` and/or ``type``.
        """
        response, error = self._request("PATCH", f"/pokemons/{pokemon_id}", json_body=fields)
        if error:
            return None, error
        return response.json(), None

    def remove_pokemon(self, pokemon_id: int) -> Tuple[Optional[str], Optional[Error]]:
        """Delete a Pokemon.

        Returns:
            A tuple ``(confirmation, error)`` where ``confirmation`` is
            the server's text, e.g. ``"Pokemon bulbasaur removed!"``.
        """
        response, error = self._request("DELETE", f"/pokemons/{pokemon_id}")
        if error:
            return None, error
        return response.text, None
