"""Application service: Browse Catalog use case (query).

Loads the catalog into a CatalogView, applies the requested filters in
the same order a shopper would, and maps the visible page to DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from artshop.application.catalog_view import CatalogStatus, CatalogView
from artshop.application.checkout import format_mad
from artshop.application.dto import CatalogPageDTO, ProductCardDTO
from artshop.domain.exceptions import CatalogFetchError
from artshop.domain.model.filter_state import DEFAULT_ITEMS_PER_PAGE, SortOption
from artshop.domain.model.product import Product
from artshop.domain.repository.catalog_source import CatalogSource
from artshop.domain.service.catalog_pipeline import CatalogPage


@dataclass(frozen=True)
class BrowseRequest:
    """Input: the filters chosen by the shopper."""

    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    search: str = ""
    sort: SortOption = SortOption.NEWEST
    page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE


class BrowseCatalogHandler:

    def __init__(self, source: CatalogSource) -> None:
        self._source = source

    def handle(self, request: BrowseRequest) -> CatalogPageDTO:
        view = CatalogView(self._source, items_per_page=request.items_per_page)
        view.load()
        if view.status is CatalogStatus.ERROR:
            raise CatalogFetchError(view.error or "Catalog could not be loaded")

        view.select_category(request.category)
        if request.min_price is not None or request.max_price is not None:
            low = request.min_price if request.min_price is not None else Decimal("0")
            high = request.max_price if request.max_price is not None else view.max_price
            view.set_price_range(low, high)
        view.search(request.search)
        view.sort_by(request.sort)
        page = view.go_to_page(request.page)
        return self._to_dto(page, view)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(page: CatalogPage, view: CatalogView) -> CatalogPageDTO:
        return CatalogPageDTO(
            products=[BrowseCatalogHandler._card(p, view) for p in page.items],
            total_count=page.total_count,
            current_page=page.current_page,
            total_pages=page.total_pages,
        )

    @staticmethod
    def _card(product: Product, view: CatalogView) -> ProductCardDTO:
        if product.category is not None:
            category = product.category.name
        else:
            category = view.category_name(product.category_id) or ""
        return ProductCardDTO(
            id=product.id,
            name=product.name,
            artist=product.artist,
            category=category,
            price=format_mad(product.unit_price),
            image=product.primary_image,
            in_stock=product.stock > 0,
        )
