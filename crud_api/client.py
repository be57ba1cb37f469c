"""Resource API client.

A thin wrapper around the users and products REST API using the
``requests`` library.  Every method returns a ``(data, error)`` tuple
instead of raising: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  ``status_code`` is ``None`` when the
request never reached the server (connection refused, timeout, ...).

Example::

    client = ResourceApiClient(base_url="http://localhost:3000")
    user, error = client.create_user({"name": "John Doe"})
    if error:
        print(error["message"])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ResourceApiClient:
    """Client for the ``/users`` and ``/products`` collections."""

    RESOURCES = ("users", "products")

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            api_prefix: Prefix the resource routers are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _path(self, resource: str, record_id: Any = None) -> str:
        if resource not in self.RESOURCES:
            raise ValueError(f"Unknown resource {resource!r}; expected one of {', '.join(self.RESOURCES)}")
        path = f"{self.api_prefix}/{resource}"
        if record_id is not None:
            path = f"{path}/{record_id}"
        return path

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses such as ``204``.
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
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Generic resource operations
    # ------------------------------------------------------------------
    def list(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._path(resource))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._path(resource, record_id))

    def create(
        self, resource: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path(resource), json_body=payload)

    def update(
        self, resource: str, record_id: Any, payload: Dict[str, Any], *, partial: bool = False
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``payload`` into a record.

        ``PATCH`` is used when ``partial`` is true and ``PUT`` otherwise;
        the server treats both the same way.
        """
        method = "PATCH" if partial else "PUT"
        return self._request(method, self._path(resource, record_id), json_body=payload)

    def delete(self, resource: str, record_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._path(resource, record_id))
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self.list("users")

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.get("users", user_id)

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.create("users", payload)

    def update_user(
        self, user_id: Any, payload: Dict[str, Any], *, partial: bool = False
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.update("users", user_id, payload, partial=partial)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        return self.delete("users", user_id)

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self.list("products")

    def get_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.get("products", product_id)

    def create_product(
        self, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.create("products", payload)

    def update_product(
        self, product_id: Any, payload: Dict[str, Any], *, partial: bool = False
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.update("products", product_id, payload, partial=partial)

    def delete_product(self, product_id: Any) -> Tuple[bool, Optional[Error]]:
        return self.delete("products", product_id)
