"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from artshop.application.cart_store import CartStore
from artshop.domain.repository.catalog_source import CatalogSource
from artshop.infrastructure.config import Settings
from artshop.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from artshop.infrastructure.persistence.json_file_storage import JsonFileStorage
from artshop.infrastructure.persistence.storage_cart_repository import (
    StorageCartRepository,
)
from artshop.infrastructure.sources.http_source import HttpCatalogSource
from artshop.infrastructure.sources.repository_source import RepositoryCatalogSource


def catalog_repository(settings: Settings) -> JsonCatalogRepository:
    return JsonCatalogRepository(
        settings.data_dir / "products.json",
        settings.data_dir / "categories.json",
    )


def catalog_source(settings: Settings) -> CatalogSource:
    """Browse the remote storefront when an API URL is configured."""
    if settings.api_url:
        return HttpCatalogSource(settings.api_url, timeout=settings.http_timeout)
    return RepositoryCatalogSource(catalog_repository(settings))


def cart_store(settings: Settings) -> CartStore:
    storage = JsonFileStorage(settings.data_dir / "storage.json")
    store = CartStore(StorageCartRepository(storage))
    store.hydrate()
    return store
