"""Abstract repository for the Product and Category aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from artshop.domain.model.product import Category, Product


class CatalogRepository(ABC):

    # --- Products -------------------------------------------------------------

    @abstractmethod
    def list_products(
        self,
        category_id: str | None = None,
        featured: bool | None = None,
        latest: bool | None = None,
    ) -> list[Product]:
        """Return products newest first, optionally narrowed server-side."""

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_product_by_slug(self, slug: str) -> Product | None:
        """Return a product by its slug, or None if not found."""

    @abstractmethod
    def save_product(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete_product(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""

    # --- Categories -----------------------------------------------------------

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return categories ordered by name, with product counts filled in."""

    @abstractmethod
    def get_category(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def find_category(
        self, name: str | None = None, slug: str | None = None
    ) -> Category | None:
        """Return the first category matching *name* or *slug*."""

    @abstractmethod
    def save_category(self, category: Category) -> None:
        """Persist a new or updated category."""

    @abstractmethod
    def delete_category(self, category_id: str) -> None:
        """Remove a category. Unknown IDs are ignored."""
