"""CatalogSource that reads straight from a CatalogRepository (local mode)."""

from __future__ import annotations

from artshop.domain.model.product import Category, Product
from artshop.domain.repository.catalog_repository import CatalogRepository
from artshop.domain.repository.catalog_source import CatalogSource


class RepositoryCatalogSource(CatalogSource):

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def fetch_products(self) -> list[Product]:
        return self._catalog_repo.list_products()

    def fetch_categories(self) -> list[Category]:
        return self._catalog_repo.list_categories()
