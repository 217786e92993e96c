"""Application service: the boutique browsing view.

CatalogView owns the FilterState and the loaded product list, and keeps
the visible page consistent with both.  Every setter recomputes the page
explicitly; there is no hidden reactivity.

Filtering happens on the already-loaded list, so a burst of filter
changes never races against a network request.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

from artshop.domain.exceptions import CatalogFetchError, CatalogNotReadyError
from artshop.domain.model.filter_state import (
    ALL_CATEGORIES,
    DEFAULT_ITEMS_PER_PAGE,
    FilterState,
    PriceRange,
    SortOption,
)
from artshop.domain.model.product import Category, Product
from artshop.domain.repository.catalog_source import CatalogSource
from artshop.domain.service.catalog_pipeline import (
    CatalogPage,
    derive_visible_products,
    full_price_range,
    max_price_bound,
)

logger = logging.getLogger(__name__)


class CatalogStatus(Enum):
    LOADING = "LOADING"
    READY = "READY"
    ERROR = "ERROR"


class CatalogView:

    def __init__(
        self,
        source: CatalogSource,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
    ) -> None:
        self._source = source
        self._products: list[Product] | None = None
        self._categories: list[Category] = []
        self._state = FilterState(items_per_page=items_per_page)
        self._page: CatalogPage | None = None
        self.status = CatalogStatus.LOADING
        self.error: str | None = None

    # --- Loading --------------------------------------------------------------

    def load(self) -> None:
        """Fetch products and categories, then compute the first page.

        A failed fetch leaves the view in ERROR status, which is distinct
        from an empty catalog.
        """
        self.status = CatalogStatus.LOADING
        self.error = None
        try:
            products = self._source.fetch_products()
            categories = self._source.fetch_categories()
        except CatalogFetchError as exc:
            logger.error("Error fetching catalog: %s", exc)
            self.status = CatalogStatus.ERROR
            self.error = str(exc)
            return

        self._products = list(products)
        self._categories = list(categories)
        self._state = self._state.with_price_range(full_price_range(self._products))
        self.status = CatalogStatus.READY
        logger.info(
            "Catalog loaded: %d product(s), %d category(ies)",
            len(self._products),
            len(self._categories),
        )
        self.recompute()

    # --- Read side ------------------------------------------------------------

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def products(self) -> list[Product]:
        return list(self._products or [])

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def max_price(self) -> Decimal:
        return max_price_bound(self._products or [])

    @property
    def page(self) -> CatalogPage:
        self._require_ready()
        assert self._page is not None
        return self._page

    @property
    def has_active_filters(self) -> bool:
        state = self._state
        return (
            state.is_category_filtered
            or state.price_range != full_price_range(self._products or [])
            or bool(state.search_query)
            or state.sort_option is not SortOption.NEWEST
        )

    def category_name(self, category_id: str) -> str | None:
        for category in self._categories:
            if category.id == category_id:
                return category.name
        return None

    # --- Filter setters (each one returns to page 1) --------------------------

    def select_category(self, category_id: str | None) -> CatalogPage:
        return self._apply(self._state.with_category(category_id))

    def set_price_range(self, low: Decimal | int | float, high: Decimal | int | float) -> CatalogPage:
        price_range = PriceRange.clamped(low, high, ceiling=self.max_price)
        return self._apply(self._state.with_price_range(price_range))

    def search(self, query: str) -> CatalogPage:
        return self._apply(self._state.with_search(query))

    def sort_by(self, option: SortOption | str) -> CatalogPage:
        if not isinstance(option, SortOption):
            option = SortOption.parse(option)
        return self._apply(self._state.with_sort(option))

    def set_items_per_page(self, items_per_page: int) -> CatalogPage:
        return self._apply(self._state.with_items_per_page(items_per_page))

    def reset_filters(self) -> CatalogPage:
        return self._apply(
            FilterState(
                selected_category=ALL_CATEGORIES,
                price_range=full_price_range(self._products or []),
                items_per_page=self._state.items_per_page,
            )
        )

    # --- Pagination -----------------------------------------------------------

    def go_to_page(self, page: int) -> CatalogPage:
        return self._apply(self._state.at_page(max(1, page)))

    def next_page(self) -> CatalogPage:
        return self.go_to_page(self._state.current_page + 1)

    def previous_page(self) -> CatalogPage:
        return self.go_to_page(self._state.current_page - 1)

    # --- Derivation -----------------------------------------------------------

    def recompute(self) -> CatalogPage:
        """Re-run the pipeline against the latest state and product list.

        A cursor beyond the last page is reset to page 1 before slicing.
        """
        self._require_ready()
        assert self._products is not None
        page = derive_visible_products(self._products, self._state)
        if self._state.current_page > max(page.total_pages, 1):
            logger.debug(
                "Page %d out of range (%d page(s)), returning to page 1",
                self._state.current_page,
                page.total_pages,
            )
            self._state = self._state.at_page(1)
            page = derive_visible_products(self._products, self._state)
        self._page = page
        return page

    def _apply(self, state: FilterState) -> CatalogPage:
        self._require_ready()
        self._state = state
        return self.recompute()

    def _require_ready(self) -> None:
        if self.status is not CatalogStatus.READY or self._products is None:
            raise CatalogNotReadyError(
                f"Catalog is not ready (status={self.status.value})"
            )
