"""Application service: Add Category use case (admin)."""

from __future__ import annotations

from artshop.domain.exceptions import ValidationError
from artshop.domain.model.product import Category, is_valid_slug
from artshop.domain.repository.catalog_repository import CatalogRepository


class AddCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, name: str, slug: str) -> Category:
        if not name or not name.strip() or not slug:
            raise ValidationError("Name and slug are required")

        if not is_valid_slug(slug):
            raise ValidationError(
                "Invalid slug format. Use only lowercase letters, numbers, and hyphens"
            )

        name = name.strip()
        existing = self._catalog_repo.find_category(name=name, slug=slug)
        if existing is not None:
            clash = "name" if existing.name == name else "slug"
            raise ValidationError(f"A category with this {clash} already exists")

        numeric_ids = [int(c.id) for c in self._catalog_repo.list_categories() if c.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        category = Category(id=next_id, name=name, slug=slug)
        self._catalog_repo.save_category(category)
        return category
