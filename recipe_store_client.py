"""Recipe Store API client.

A thin wrapper around the REST surface of the Recipe Store API built
on ``requests``.  Every high level method returns a ``(result, error)``
tuple: on success ``error`` is ``None``; on failure ``result`` is an
empty value and ``error`` is a dictionary with keys ``status_code``
and ``message``.  Nothing is raised for HTTP or connection errors,
which keeps callers such as scripts and test suites simple.

* :meth:`list_recipes` – return every recipe.
* :meth:`get_recipe` – fetch a single recipe by id.
* :meth:`create_recipe` – create a recipe and return it with its id.
* :meth:`update_recipe` – replace name and ingredients of a recipe.
* :meth:`delete_recipe` – remove a recipe.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecipeStoreAPI:
    """Client for interacting with the Recipe Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        recipes_path: str = "/recipes",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://127.0.0.1:8080``.
            recipes_path: Path of the recipe collection, relative to
                ``base_url``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.recipes_path = "/" + recipes_path.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/recipes``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # ``Response`` is falsy for 4xx/5xx, so compare against None.
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

    def _item_path(self, recipe_id: Any) -> str:
        return f"{self.recipes_path}/{recipe_id}"

    # ------------------------------------------------------------------
    # Recipe operations
    # ------------------------------------------------------------------
    def list_recipes(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all recipes, in collection order."""
        data, error = self._request("GET", self.recipes_path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": "Unexpected response shape for recipe list"}

    def get_recipe(self, recipe_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single recipe by id."""
        return self._request("GET", self._item_path(recipe_id))

    def create_recipe(
        self, name: str, ingredients: Sequence[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a recipe.

        Returns:
            A tuple ``(recipe, error)``; ``recipe`` carries the id
            assigned by the server.
        """
        payload = {"name": name, "ingredients": list(ingredients)}
        return self._request("POST", self.recipes_path, json_body=payload)

    def update_recipe(
        self, recipe_id: Any, name: str, ingredients: Sequence[str]
    ) -> Tuple[bool, Optional[Error]]:
        """Replace name and ingredients of an existing recipe.

        Returns:
            A tuple ``(success, error)``.
        """
        payload = {"id": str(recipe_id), "name": name, "ingredients": list(ingredients)}
        _, error = self._request("PUT", self._item_path(recipe_id), json_body=payload)
        if error:
            return False, error
        return True, None

    def delete_recipe(self, recipe_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a recipe.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._item_path(recipe_id))
        if error:
            return False, error
        return True, None
