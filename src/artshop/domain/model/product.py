"""Product and Category aggregates.

Products live independently of carts. They have their own lifecycle:
prices change, artworks are added and removed from the catalog.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from artshop.domain.exceptions import ValidationError
from artshop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def coerce_price(raw: str | int | float | Decimal | None) -> Decimal:
    """Turn a price as delivered by the catalog API into a Decimal.

    Prices often arrive as numeric strings. Anything that does not parse
    to a finite number is treated as 0 and logged.
    """
    if isinstance(raw, Decimal):
        value = raw
    else:
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            logger.warning("Unparseable product price %r, treating as 0", raw)
            return Decimal("0")
    if not value.is_finite():
        logger.warning("Non-finite product price %r, treating as 0", raw)
        return Decimal("0")
    return value


def is_valid_slug(slug: str) -> bool:
    return bool(SLUG_PATTERN.match(slug))


def slugify(name: str) -> str:
    """Propose a URL slug from a display name ("Blue Nature" -> "blue-nature")."""
    words = re.findall(r"[a-z0-9]+", name.lower())
    return "-".join(words)


@dataclass(frozen=True)
class CategoryRef:
    """Denormalised category details embedded in a product."""

    id: str
    name: str
    slug: str


@dataclass
class Category:
    """A collection that groups artworks (paintings, sculptures, ...)."""

    id: str
    name: str
    slug: str
    product_count: int = 0

    def ref(self) -> CategoryRef:
        return CategoryRef(id=self.id, name=self.name, slug=self.slug)


@dataclass
class Product:
    """An artwork in the catalog.

    ``price`` is kept exactly as received; use ``unit_price`` for
    comparisons and arithmetic.
    """

    id: str
    name: str
    price: str | int | float | Decimal
    category_id: str
    slug: str = ""
    description: str = ""
    images: list[str] = field(default_factory=list)
    category: CategoryRef | None = None
    artist: str | None = None
    featured: bool = False
    latest: bool = False
    stock: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def unit_price(self) -> Decimal:
        return coerce_price(self.price)

    @property
    def primary_image(self) -> str:
        return self.images[0] if self.images else ""

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Carts are unaffected: a line item keeps the price it was
        added with.
        """
        if not new_price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        self.price = str(new_price.amount)

    def update_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = stock

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name cannot be empty")
        self.name = name.strip()

    def change_slug(self, slug: str) -> None:
        if not is_valid_slug(slug):
            raise ValidationError(
                "Invalid slug format. Use only lowercase letters, numbers, and hyphens"
            )
        self.slug = slug

    def move_to(self, category: Category) -> None:
        self.category_id = category.id
        self.category = category.ref()
