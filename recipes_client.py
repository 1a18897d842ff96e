"""Recipe Store API client.

This module defines a small client wrapper around the recipe HTTP
surface served by ``recipe_store_api``.  It uses the ``requests``
library internally to make HTTP calls and exposes one method per
operation:

* :meth:`RecipesClient.list_recipes` – return all stored recipes.
* :meth:`RecipesClient.create_recipe` – create a recipe and return it.
* :meth:`RecipesClient.replace_recipe` – replace name and ingredients.
* :meth:`RecipesClient.delete_recipe` – delete a recipe by id.

Every method returns a tuple ``(result, error)``.  ``error`` is ``None``
on success; otherwise it is a dictionary with the keys ``status_code``
and ``message``.  Network failures never raise out of the client.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

RECIPES_PATH = "/recipes"


class RecipesClient:
    """Client for interacting with the recipe store API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
                Include the API prefix if the service mounts one.
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
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/recipes``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
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
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Recipe operations
    # ------------------------------------------------------------------
    def list_recipes(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all recipes.

        Returns:
            A tuple ``(recipes, error)``. ``recipes`` is empty on failure.
        """
        data, error = self._request("GET", RECIPES_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_recipe(
        self, name: str, ingredients: List[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a recipe.

        Returns:
            A tuple ``(recipe, error)``; ``recipe`` includes the id
            assigned by the server.
        """
        payload = {"name": name, "ingredients": list(ingredients)}
        return self._request("POST", RECIPES_PATH, json_body=payload)

    def replace_recipe(
        self, recipe_id: Any, name: str, ingredients: List[str]
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Replace the name and ingredients of an existing recipe.

        Returns:
            A tuple ``(success, error)``.
        """
        payload = {"id": recipe_id, "name": name, "ingredients": list(ingredients)}
        _, error = self._request("PUT", f"{RECIPES_PATH}/{recipe_id}", json_body=payload)
        if error:
            return False, error
        return True, None

    def delete_recipe(self, recipe_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a recipe.

        Returns:
            A tuple ``(success, error)``.  Deleting an unknown id
            succeeds, as the server treats deletes as idempotent.
        """
        _, error = self._request("DELETE", f"{RECIPES_PATH}/{recipe_id}")
        if error:
            return False, error
        return True, None
