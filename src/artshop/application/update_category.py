"""Application service: Update Category use case (admin)."""

from __future__ import annotations

from artshop.domain.exceptions import EntityNotFoundError, ValidationError
from artshop.domain.model.product import Category, is_valid_slug
from artshop.domain.repository.catalog_repository import CatalogRepository


class UpdateCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        category_id: str,
        name: str | None = None,
        slug: str | None = None,
    ) -> Category:
        """Rename a category or change its slug.

        Artworks in the category carry a copy of its name and slug, so
        they are re-saved with the new details.
        """
        if not (name and name.strip()) and not slug:
            raise ValidationError("At least one field (name or slug) is required")
        if slug and not is_valid_slug(slug):
            raise ValidationError(
                "Invalid slug format. Use only lowercase letters, numbers, and hyphens"
            )

        category = self._catalog_repo.get_category(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")

        name = name.strip() if name and name.strip() else None
        for other in self._catalog_repo.list_categories():
            if other.id == category.id:
                continue
            if name is not None and other.name == name:
                raise ValidationError("A category with this name already exists")
            if slug and other.slug == slug:
                raise ValidationError("A category with this slug already exists")

        if name is not None:
            category.name = name
        if slug:
            category.slug = slug
        self._catalog_repo.save_category(category)

        for product in self._catalog_repo.list_products(category_id=category.id):
            product.move_to(category)
            self._catalog_repo.save_product(product)
        return category
