"""Product Store API client.

A small blocking client around the ``/products`` resource of the
Product Store API, built on the ``requests`` library.  It exposes:

* :meth:`ProductStoreAPI.create_product` – create a product and get its id.
* :meth:`ProductStoreAPI.list_products` – list products, optionally by type.

Methods never raise on HTTP or transport failures.  They return a
tuple ``(data, error)`` where ``error`` is ``None`` on success and a
dictionary with the keys ``status_code`` and ``message`` otherwise.
For rejected requests ``message`` is the server's ``error`` field,
e.g. ``"Inventory must be between 1 and 9999"``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/products"


class ProductStoreAPI:
    """Client for interacting with the Product Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
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
    # Product operations
    # ------------------------------------------------------------------
    def create_product(self, details: Dict[str, Any]) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        """Create a product.

        Args:
            details: Mapping with ``name``, ``type``, ``inventory`` and
                ``cost``.
        Returns:
            A tuple ``(product_id, error)``.
        """
        data, error = self._request("POST", PRODUCTS_PATH, json_body=details)
        if error:
            return None, error
        if isinstance(data, dict) and "id" in data:
            return data["id"], None
        return None, {"status_code": None, "message": f"Unexpected response: {data!r}"}

    def list_products(self, product_type: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve products, optionally only those of ``product_type``.

        Returns:
            A tuple ``(products, error)``.  ``products`` is empty on failure.
        """
        params = {"type": product_type} if product_type is not None else None
        data, error = self._request("GET", PRODUCTS_PATH, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None
