"""Domain service: catalog filter / sort / paginate pipeline.

Derives the page of artworks a shopper sees from the full product list
and the current FilterState.  The functions here are pure: same input,
same output, no I/O.

Stages run in a fixed order, each narrowing the candidate set:

  1. category   — keep products in the selected category (unless "all")
  2. price      — keep products whose coerced price lies in the range
  3. search     — case-insensitive substring over name/description/artist
  4. sort       — stable; "newest" keeps the order received from the API
  5. paginate   — slice out ``current_page``
"""

from __future__ import annotations

import locale
import math
import unicodedata
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from artshop.domain.model.filter_state import (
    DEFAULT_MAX_PRICE,
    PRICE_MARGIN,
    FilterState,
    PriceRange,
    SortOption,
)
from artshop.domain.model.product import Product


@dataclass(frozen=True)
class CatalogPage:
    """Output of the pipeline for one FilterState."""

    items: list[Product]
    total_count: int
    total_pages: int
    current_page: int

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def derive_visible_products(
    products: Sequence[Product], state: FilterState
) -> CatalogPage:
    """Run every stage and return the visible slice.

    An out-of-range ``current_page`` is not corrected here; it simply
    yields an empty slice.  Resetting the cursor is the caller's job.
    """
    filtered = filter_products(products, state)
    ordered = sort_products(filtered, state.sort_option)
    return paginate(ordered, state.current_page, state.items_per_page)


def filter_products(products: Iterable[Product], state: FilterState) -> list[Product]:
    result = list(products)
    if state.is_category_filtered:
        result = [p for p in result if p.category_id == state.selected_category]
    result = [p for p in result if state.price_range.contains(p.unit_price)]
    if state.search_query:
        result = [p for p in result if matches_search(p, state.search_query)]
    return result


def matches_search(product: Product, query: str) -> bool:
    needle = query.lower()
    if needle in product.name.lower():
        return True
    if product.description and needle in product.description.lower():
        return True
    if product.artist and needle in product.artist.lower():
        return True
    return False


def _name_key(product: Product) -> tuple[str, str]:
    """Accents and case are secondary: "Éclat" sorts with the E's.

    Names equal after folding fall back to the active LC_COLLATE order.
    """
    name = product.name.casefold()
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return folded, locale.strxfrm(name)


def _price_key(product: Product) -> Decimal:
    return product.unit_price


_SORTS: dict[SortOption, tuple[Callable[[Product], object], bool]] = {
    SortOption.PRICE_LOW: (_price_key, False),
    SortOption.PRICE_HIGH: (_price_key, True),
    SortOption.NAME_ASC: (_name_key, False),
    SortOption.NAME_DESC: (_name_key, True),
}


def sort_products(products: Iterable[Product], option: SortOption) -> list[Product]:
    """Stable sort.  ``sorted(reverse=True)`` keeps ties in input order too."""
    if option not in _SORTS:
        return list(products)
    key, reverse = _SORTS[option]
    return sorted(products, key=key, reverse=reverse)


def paginate(products: Sequence[Product], page: int, per_page: int) -> CatalogPage:
    total = len(products)
    total_pages = math.ceil(total / per_page)
    start = (page - 1) * per_page
    return CatalogPage(
        items=list(products[start:start + per_page]),
        total_count=total,
        total_pages=total_pages,
        current_page=page,
    )


def max_price_bound(products: Sequence[Product]) -> Decimal:
    """Upper bound for the price slider: highest price plus a margin."""
    if not products:
        return DEFAULT_MAX_PRICE
    return max(p.unit_price for p in products) + PRICE_MARGIN


def full_price_range(products: Sequence[Product]) -> PriceRange:
    return PriceRange(Decimal("0"), max_price_bound(products))
