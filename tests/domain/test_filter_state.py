"""Unit tests for FilterState and PriceRange."""

from decimal import Decimal

import pytest

from artshop.domain.exceptions import ValidationError
from artshop.domain.model.filter_state import (
    ALL_CATEGORIES,
    DEFAULT_ITEMS_PER_PAGE,
    FilterState,
    PriceRange,
    SortOption,
)


class TestPriceRange:

    def test_bounds_are_inclusive(self):
        r = PriceRange(Decimal("200"), Decimal("1000"))
        assert r.contains(Decimal("200"))
        assert r.contains(Decimal("1000"))
        assert not r.contains(Decimal("199.99"))
        assert not r.contains(Decimal("1000.01"))

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError, match="exceeds upper bound"):
            PriceRange(Decimal("10"), Decimal("5"))

    def test_negative_lower_bound_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            PriceRange(Decimal("-1"), Decimal("5"))

    def test_clamped_fixes_negative_and_inverted_input(self):
        r = PriceRange.clamped(-50, -10)
        assert r == PriceRange(Decimal("0"), Decimal("0"))
        r = PriceRange.clamped(300, 200)
        assert r == PriceRange(Decimal("300"), Decimal("300"))

    def test_clamped_respects_ceiling(self):
        r = PriceRange.clamped(0, 999999, ceiling=Decimal("5500"))
        assert r.high == Decimal("5500")


class TestSortOption:

    def test_parse_known_values(self):
        assert SortOption.parse("price-low") is SortOption.PRICE_LOW
        assert SortOption.parse("name-desc") is SortOption.NAME_DESC

    def test_unknown_value_means_newest(self):
        assert SortOption.parse("popularity") is SortOption.NEWEST
        assert SortOption.parse(None) is SortOption.NEWEST


class TestFilterState:

    def test_defaults(self):
        state = FilterState()
        assert state.selected_category == ALL_CATEGORIES
        assert state.sort_option is SortOption.NEWEST
        assert state.current_page == 1
        assert state.items_per_page == DEFAULT_ITEMS_PER_PAGE
        assert state.search_query == ""

    @pytest.mark.parametrize(
        "change",
        [
            lambda s: s.with_category("B"),
            lambda s: s.with_price_range(PriceRange(Decimal("0"), Decimal("10"))),
            lambda s: s.with_search("blue"),
            lambda s: s.with_sort(SortOption.PRICE_HIGH),
            lambda s: s.with_items_per_page(24),
        ],
    )
    def test_every_filter_change_returns_to_page_one(self, change):
        state = FilterState().at_page(4)
        assert change(state).current_page == 1

    def test_none_category_means_all(self):
        assert FilterState().with_category("B").with_category(None).selected_category == ALL_CATEGORIES

    def test_at_page_keeps_filters(self):
        state = FilterState().with_search("blue").at_page(3)
        assert state.search_query == "blue"
        assert state.current_page == 3

    def test_page_zero_rejected(self):
        with pytest.raises(ValidationError, match="start at 1"):
            FilterState(current_page=0)

    def test_items_per_page_floor(self):
        assert FilterState().with_items_per_page(0).items_per_page == 1
