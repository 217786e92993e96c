"""Application service: Delete Product use case (admin)."""

from __future__ import annotations

from artshop.domain.exceptions import EntityNotFoundError
from artshop.domain.repository.catalog_repository import CatalogRepository


class DeleteProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, product_id: str) -> None:
        if self._catalog_repo.get_product(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._catalog_repo.delete_product(product_id)
