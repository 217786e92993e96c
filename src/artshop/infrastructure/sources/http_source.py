"""CatalogSource backed by the storefront's JSON API.

    GET {base_url}/api/products     -> [Product, ...] newest first
    GET {base_url}/api/categories   -> [Category, ...] with _count.products

Any transport, HTTP status or decoding problem is raised as
CatalogFetchError so the view can show an error state rather than an
empty catalog.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from artshop.domain.exceptions import CatalogFetchError
from artshop.domain.model.product import Category, Product
from artshop.domain.repository.catalog_source import CatalogSource
from artshop.infrastructure.serialization import category_from_raw, product_from_raw

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpCatalogSource(CatalogSource):

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_products(
        self,
        category: str | None = None,
        featured: bool | None = None,
        latest: bool | None = None,
    ) -> list[Product]:
        """Fetch products; the optional filters are applied by the server."""
        params: dict[str, str] = {}
        if category:
            params["category"] = category
        if featured is not None:
            params["featured"] = str(featured).lower()
        if latest is not None:
            params["latest"] = str(latest).lower()
        records = self._get_list("/api/products", params)
        try:
            return [product_from_raw(raw) for raw in records]
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogFetchError(f"Malformed product record: {exc}") from exc

    def fetch_categories(self) -> list[Category]:
        records = self._get_list("/api/categories", {})
        try:
            return [category_from_raw(raw) for raw in records]
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogFetchError(f"Malformed category record: {exc}") from exc

    # --- Internal helpers -----------------------------------------------------

    def _get_list(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._session.get(url, params=params or None, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise CatalogFetchError(f"Failed to fetch {url}: {exc}") from exc
        except ValueError as exc:
            raise CatalogFetchError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, list):
            message = data.get("error") if isinstance(data, dict) else None
            raise CatalogFetchError(message or f"Expected a JSON array from {url}")
        return data
