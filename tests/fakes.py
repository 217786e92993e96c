"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON-file and HTTP
implementations but keep everything in dicts. No file I/O, no network.
"""

from __future__ import annotations

from artshop.domain.exceptions import CatalogFetchError
from artshop.domain.model.product import Category, Product
from artshop.domain.repository.catalog_repository import CatalogRepository
from artshop.domain.repository.catalog_source import CatalogSource
from artshop.domain.repository.key_value_storage import KeyValueStorage


class FakeStorage(KeyValueStorage):

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value
        self.writes += 1


class FailingWriteStorage(FakeStorage):
    """Reads work; every write fails like a full or read-only disk."""

    def set(self, key: str, value: str) -> None:
        raise OSError("No space left on device")


class FakeCatalogRepository(CatalogRepository):

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products or []}
        self._categories: dict[str, Category] = {c.id: c for c in categories or []}

    def list_products(
        self,
        category_id: str | None = None,
        featured: bool | None = None,
        latest: bool | None = None,
    ) -> list[Product]:
        result = list(self._products.values())
        if category_id is not None:
            result = [p for p in result if p.category_id == category_id]
        if featured is not None:
            result = [p for p in result if p.featured == featured]
        if latest is not None:
            result = [p for p in result if p.latest == latest]
        return sorted(result, key=lambda p: p.created_at, reverse=True)

    def get_product(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def get_product_by_slug(self, slug: str) -> Product | None:
        for p in self._products.values():
            if p.slug == slug:
                return p
        return None

    def save_product(self, product: Product) -> None:
        self._products[product.id] = product

    def delete_product(self, product_id: str) -> None:
        self._products.pop(product_id, None)

    def list_categories(self) -> list[Category]:
        for c in self._categories.values():
            c.product_count = sum(1 for p in self._products.values() if p.category_id == c.id)
        return sorted(self._categories.values(), key=lambda c: c.name)

    def get_category(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    def find_category(
        self, name: str | None = None, slug: str | None = None
    ) -> Category | None:
        for c in self._categories.values():
            if (name is not None and c.name == name) or (slug is not None and c.slug == slug):
                return c
        return None

    def save_category(self, category: Category) -> None:
        self._categories[category.id] = category

    def delete_category(self, category_id: str) -> None:
        self._categories.pop(category_id, None)


class FakeCatalogSource(CatalogSource):

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        self.products = list(products or [])
        self.categories = list(categories or [])
        self.fetches = 0

    def fetch_products(self) -> list[Product]:
        self.fetches += 1
        return list(self.products)

    def fetch_categories(self) -> list[Category]:
        return list(self.categories)


class FailingCatalogSource(CatalogSource):

    def fetch_products(self) -> list[Product]:
        raise CatalogFetchError("Failed to fetch products")

    def fetch_categories(self) -> list[Category]:
        raise CatalogFetchError("Failed to fetch categories")
