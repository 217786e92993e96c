"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
from pathlib import Path

from artshop.domain.model.product import Category, Product
from artshop.domain.repository.catalog_repository import CatalogRepository
from artshop.infrastructure.serialization import (
    category_from_raw,
    category_to_raw,
    product_from_raw,
    product_to_raw,
)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, products_path: Path, categories_path: Path) -> None:
        self._products_path = products_path
        self._categories_path = categories_path
        self._ensure_file(self._products_path)
        self._ensure_file(self._categories_path)

    # --- Products -------------------------------------------------------------

    def list_products(
        self,
        category_id: str | None = None,
        featured: bool | None = None,
        latest: bool | None = None,
    ) -> list[Product]:
        products = self._load_products()
        if category_id is not None:
            products = [p for p in products if p.category_id == category_id]
        if featured is not None:
            products = [p for p in products if p.featured == featured]
        if latest is not None:
            products = [p for p in products if p.latest == latest]
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def get_product(self, product_id: str) -> Product | None:
        for product in self._load_products():
            if product.id == product_id:
                return product
        return None

    def get_product_by_slug(self, slug: str) -> Product | None:
        for product in self._load_products():
            if product.slug == slug:
                return product
        return None

    def save_product(self, product: Product) -> None:
        # Upsert: replace if exists, otherwise append
        products = [p for p in self._load_products() if p.id != product.id]
        products.append(product)
        self._persist(self._products_path, [product_to_raw(p) for p in products])

    def delete_product(self, product_id: str) -> None:
        products = [p for p in self._load_products() if p.id != product_id]
        self._persist(self._products_path, [product_to_raw(p) for p in products])

    # --- Categories -----------------------------------------------------------

    def list_categories(self) -> list[Category]:
        counts: dict[str, int] = {}
        for product in self._load_products():
            counts[product.category_id] = counts.get(product.category_id, 0) + 1
        categories = self._load_categories()
        for category in categories:
            category.product_count = counts.get(category.id, 0)
        return sorted(categories, key=lambda c: c.name)

    def get_category(self, category_id: str) -> Category | None:
        for category in self.list_categories():
            if category.id == category_id:
                return category
        return None

    def find_category(
        self, name: str | None = None, slug: str | None = None
    ) -> Category | None:
        for category in self.list_categories():
            if (name is not None and category.name == name) or (
                slug is not None and category.slug == slug
            ):
                return category
        return None

    def save_category(self, category: Category) -> None:
        categories = [c for c in self._load_categories() if c.id != category.id]
        categories.append(category)
        self._persist(self._categories_path, [category_to_raw(c) for c in categories])

    def delete_category(self, category_id: str) -> None:
        categories = [c for c in self._load_categories() if c.id != category_id]
        self._persist(self._categories_path, [category_to_raw(c) for c in categories])

    # --- File helpers ---------------------------------------------------------

    def _load_products(self) -> list[Product]:
        return [product_from_raw(raw) for raw in self._load_raw(self._products_path)]

    def _load_categories(self) -> list[Category]:
        return [category_from_raw(raw) for raw in self._load_raw(self._categories_path)]

    @staticmethod
    def _load_raw(path: Path) -> list[dict]:
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _persist(path: Path, records: list[dict]) -> None:
        path.write_text(json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    @staticmethod
    def _ensure_file(path: Path) -> None:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")
