"""Application service: Delete Category use case (admin).

A category that still holds artworks cannot be deleted; move or delete
the artworks first.
"""

from __future__ import annotations

from artshop.domain.exceptions import EntityNotFoundError, ValidationError
from artshop.domain.repository.catalog_repository import CatalogRepository


class DeleteCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, category_id: str) -> None:
        category = self._catalog_repo.get_category(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")

        in_use = self._catalog_repo.list_products(category_id=category_id)
        if in_use:
            raise ValidationError(
                f"Category '{category.name}' still contains {len(in_use)} product(s)"
            )
        self._catalog_repo.delete_category(category_id)
