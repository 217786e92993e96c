"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineItemDTO:
    """Output: a single cart line as displayed to the shopper."""

    id: str
    name: str
    artist: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "$1,500.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineItemDTO]
    count: int
    total: str


@dataclass(frozen=True)
class CheckoutDTO:
    message: str
    link: str
    item_count: int
    total: str


@dataclass(frozen=True)
class InquiryDTO:
    product_id: str
    message: str
    link: str


@dataclass(frozen=True)
class ProductCardDTO:
    """Output: one artwork as shown in the boutique grid."""

    id: str
    name: str
    artist: str | None
    category: str
    price: str  # formatted, e.g. "12 500 MAD"
    image: str
    in_stock: bool


@dataclass(frozen=True)
class CatalogPageDTO:
    products: list[ProductCardDTO]
    total_count: int
    current_page: int
    total_pages: int
