"""Application service: Add Product use case (admin)."""

from __future__ import annotations

from dataclasses import dataclass, field

from artshop.domain.exceptions import EntityNotFoundError, ValidationError
from artshop.domain.model.product import Product, is_valid_slug
from artshop.domain.model.value_objects import Money
from artshop.domain.repository.catalog_repository import CatalogRepository


@dataclass(frozen=True)
class NewProductSpec:
    """Input: the fields submitted by the "new artwork" form."""

    name: str
    price: str
    category_id: str
    slug: str
    description: str = ""
    artist: str | None = None
    stock: int = 0
    featured: bool = False
    latest: bool = False
    images: list[str] = field(default_factory=list)


class AddProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, spec: NewProductSpec) -> Product:
        """Add a new artwork to the catalog."""
        if not (spec.name and spec.name.strip()) or not spec.price or not spec.category_id or not spec.slug:
            raise ValidationError(
                "Missing required fields: name, price, category and slug are required"
            )

        if not is_valid_slug(spec.slug):
            raise ValidationError(
                "Invalid slug format. Use only lowercase letters, numbers, and hyphens"
            )

        if self._catalog_repo.get_product_by_slug(spec.slug) is not None:
            raise ValidationError("Slug is already in use. Please choose a different one")

        category = self._catalog_repo.get_category(spec.category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID '{spec.category_id}' not found")

        price = Money.of(spec.price)
        if not price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        if spec.stock < 0:
            raise ValidationError("Stock cannot be negative")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in self._catalog_repo.list_products() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=spec.name.strip(),
            price=str(price.amount),
            category_id=category.id,
            slug=spec.slug,
            description=spec.description,
            images=list(spec.images),
            category=category.ref(),
            artist=spec.artist or None,
            featured=spec.featured,
            latest=spec.latest,
            stock=spec.stock,
        )
        self._catalog_repo.save_product(product)
        return product
