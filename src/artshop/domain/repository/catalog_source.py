"""Abstract source of the product and category lists shown in the boutique."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artshop.domain.model.product import Category, Product


class CatalogSource(ABC):

    @abstractmethod
    def fetch_products(self) -> list[Product]:
        """Return every product, newest first.

        Raises CatalogFetchError if the list cannot be retrieved.
        """

    @abstractmethod
    def fetch_categories(self) -> list[Category]:
        """Return every category with its product count."""
