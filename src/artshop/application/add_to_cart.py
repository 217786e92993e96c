"""Application service: Add to Cart use case.

Looks the artwork up in the catalog and hands a snapshot of it to the
cart store.  The snapshot is what the cart keeps, so later catalog
price changes do not reach items already in the cart.
"""

from __future__ import annotations

from artshop.application.cart_store import CartStore
from artshop.domain.exceptions import EntityNotFoundError
from artshop.domain.model.cart import CartItemSnapshot
from artshop.domain.model.product import Product
from artshop.domain.model.value_objects import Money
from artshop.domain.repository.catalog_source import CatalogSource


def find_product(source: CatalogSource, product_ref: str) -> Product:
    """Look an artwork up by id or slug."""
    for product in source.fetch_products():
        if product.id == product_ref or product.slug == product_ref:
            return product
    raise EntityNotFoundError(f"Product not found: '{product_ref}'")


def snapshot_of(product: Product) -> CartItemSnapshot:
    return CartItemSnapshot(
        id=product.id,
        name=product.name,
        price=Money(product.unit_price),
        image=product.primary_image,
        artist=product.artist,
    )


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, source: CatalogSource) -> None:
        self._cart_store = cart_store
        self._source = source

    def handle(self, product_id: str) -> CartItemSnapshot:
        product = find_product(self._source, product_id)
        snapshot = snapshot_of(product)
        self._cart_store.add_to_cart(snapshot)
        return snapshot
