"""Application service: Update Product use case (admin)."""

from __future__ import annotations

from artshop.domain.exceptions import EntityNotFoundError, ValidationError
from artshop.domain.model.product import Product
from artshop.domain.model.value_objects import Money
from artshop.domain.repository.catalog_repository import CatalogRepository


class UpdateProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        stock: int | None = None,
        featured: bool | None = None,
        latest: bool | None = None,
        name: str | None = None,
        description: str | None = None,
        category_id: str | None = None,
        slug: str | None = None,
        images: list[str] | None = None,
        artist: str | None = None,
    ) -> Product:
        """Edit an artwork. Only the fields passed (not None) change.

        This does NOT affect carts — line items captured a price
        snapshot when they were added.
        """
        changes = (
            new_price, stock, featured, latest, name, description,
            category_id, slug, images, artist,
        )
        if all(value is None for value in changes):
            raise ValidationError("Nothing to update")

        product = self._catalog_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if slug is not None and slug != product.slug:
            taken = self._catalog_repo.get_product_by_slug(slug)
            if taken is not None and taken.id != product.id:
                raise ValidationError("Slug is already in use by another product")
            product.change_slug(slug)
        if category_id is not None:
            category = self._catalog_repo.get_category(category_id)
            if category is None:
                raise EntityNotFoundError(f"Category with ID '{category_id}' not found")
            product.move_to(category)
        if name is not None:
            product.rename(name)
        if description is not None:
            product.description = description
        if images is not None:
            product.images = list(images)
        if artist is not None:
            product.artist = artist or None
        if new_price is not None:
            product.update_price(Money.of(new_price))
        if stock is not None:
            product.update_stock(stock)
        if featured is not None:
            product.featured = featured
        if latest is not None:
            product.latest = latest

        self._catalog_repo.save_product(product)
        return product
