"""Catalog filter state — what the shopper has chosen to look at.

FilterState is immutable. Every ``with_*`` method returns a new state
whose page cursor is back on page 1, so narrowing the result set can
never leave the shopper on a page that no longer exists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from artshop.domain.exceptions import ValidationError

ALL_CATEGORIES = "all"
DEFAULT_ITEMS_PER_PAGE = 12
DEFAULT_MAX_PRICE = Decimal("50000")
PRICE_MARGIN = Decimal("5000")


class SortOption(Enum):
    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @classmethod
    def parse(cls, raw: str | None) -> SortOption:
        """Unknown keys fall back to NEWEST (API order)."""
        for option in cls:
            if option.value == raw:
                return option
        return cls.NEWEST


@dataclass(frozen=True)
class PriceRange:
    """Closed interval ``[low, high]``, inclusive on both ends."""

    low: Decimal
    high: Decimal

    def __post_init__(self) -> None:
        if self.low < 0:
            raise ValidationError(f"Price range lower bound cannot be negative, got {self.low}")
        if self.low > self.high:
            raise ValidationError(
                f"Price range lower bound {self.low} exceeds upper bound {self.high}"
            )

    def contains(self, price: Decimal) -> bool:
        return self.low <= price <= self.high

    @staticmethod
    def clamped(
        low: Decimal | int | float,
        high: Decimal | int | float,
        ceiling: Decimal | None = None,
    ) -> PriceRange:
        """Build a range from raw slider values, clamping instead of rejecting.

        Negative bounds become 0, bounds above *ceiling* are pulled down to
        it, and an upper bound below the lower bound is raised to meet it.
        """
        lo = max(Decimal(str(low)), Decimal("0"))
        hi = max(Decimal(str(high)), Decimal("0"))
        if ceiling is not None:
            lo = min(lo, ceiling)
            hi = min(hi, ceiling)
        return PriceRange(lo, max(lo, hi))

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"


@dataclass(frozen=True)
class FilterState:
    selected_category: str = ALL_CATEGORIES
    price_range: PriceRange = PriceRange(Decimal("0"), DEFAULT_MAX_PRICE)
    search_query: str = ""
    sort_option: SortOption = SortOption.NEWEST
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValidationError("Page numbers start at 1")
        if self.items_per_page < 1:
            raise ValidationError("Items per page must be positive")

    # --- Filter dimensions (all reset the page cursor) ------------------------

    def with_category(self, category_id: str | None) -> FilterState:
        return replace(self, selected_category=category_id or ALL_CATEGORIES, current_page=1)

    def with_price_range(self, price_range: PriceRange) -> FilterState:
        return replace(self, price_range=price_range, current_page=1)

    def with_search(self, query: str) -> FilterState:
        return replace(self, search_query=query, current_page=1)

    def with_sort(self, option: SortOption) -> FilterState:
        return replace(self, sort_option=option, current_page=1)

    def with_items_per_page(self, items_per_page: int) -> FilterState:
        return replace(self, items_per_page=max(1, items_per_page), current_page=1)

    # --- Pagination cursor ----------------------------------------------------

    def at_page(self, page: int) -> FilterState:
        return replace(self, current_page=page)

    @property
    def is_category_filtered(self) -> bool:
        return self.selected_category != ALL_CATEGORIES
