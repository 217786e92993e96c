"""Tests for the HTTP catalog source (requests is mocked)."""

from decimal import Decimal
from unittest.mock import Mock

import pytest
import requests

from artshop.domain.exceptions import CatalogFetchError
from artshop.infrastructure.sources.http_source import HttpCatalogSource

PRODUCTS = [
    {
        "id": "ck1",
        "name": "Blue Nature",
        "slug": "blue-nature",
        "description": "Oil on canvas",
        "price": "300.00",
        "images": ["/uploads/blue.jpg"],
        "stock": 1,
        "categoryId": "cat1",
        "artist": None,
        "featured": True,
        "latest": False,
        "createdAt": "2024-05-01T10:00:00.000Z",
        "category": {"id": "cat1", "name": "Nature", "slug": "nature"},
    }
]

CATEGORIES = [
    {"id": "cat1", "name": "Nature", "slug": "nature", "_count": {"products": 1}},
    {"id": "cat2", "name": "Portraits", "slug": "portraits", "productCount": 4},
]


def _session(payload=None, status_error=None, side_effect=None) -> Mock:
    response = Mock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = Mock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    return session


class TestHttpCatalogSource:

    def test_parses_products(self):
        session = _session(PRODUCTS)
        source = HttpCatalogSource("https://shop.example/", timeout=3, session=session)

        products = source.fetch_products()

        session.get.assert_called_once_with("https://shop.example/api/products", params=None, timeout=3)
        product = products[0]
        assert product.id == "ck1"
        assert product.unit_price == Decimal("300.00")
        assert product.category_id == "cat1"
        assert product.category.name == "Nature"
        assert product.artist is None
        assert product.featured is True
        assert product.created_at.year == 2024

    def test_server_side_filters_become_query_params(self):
        session = _session([])
        HttpCatalogSource("https://shop.example", session=session).fetch_products(
            category="cat1", featured=True
        )
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"category": "cat1", "featured": "true"}

    def test_parses_categories_in_both_count_shapes(self):
        source = HttpCatalogSource("https://shop.example", session=_session(CATEGORIES))
        categories = source.fetch_categories()
        assert [(c.name, c.product_count) for c in categories] == [("Nature", 1), ("Portraits", 4)]

    def test_connection_error(self):
        session = _session(side_effect=requests.ConnectionError("refused"))
        with pytest.raises(CatalogFetchError, match="Failed to fetch"):
            HttpCatalogSource("https://shop.example", session=session).fetch_products()

    def test_http_error(self):
        session = _session({"error": "Failed to fetch products"}, status_error=requests.HTTPError("500"))
        with pytest.raises(CatalogFetchError):
            HttpCatalogSource("https://shop.example", session=session).fetch_products()

    def test_error_body_instead_of_list(self):
        session = _session({"error": "Failed to fetch categories"})
        with pytest.raises(CatalogFetchError, match="Failed to fetch categories"):
            HttpCatalogSource("https://shop.example", session=session).fetch_categories()

    def test_invalid_json(self):
        session = _session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        with pytest.raises(CatalogFetchError, match="Invalid JSON"):
            HttpCatalogSource("https://shop.example", session=session).fetch_products()

    def test_malformed_record(self):
        session = _session([{"price": "10"}])
        with pytest.raises(CatalogFetchError, match="Malformed product record"):
            HttpCatalogSource("https://shop.example", session=session).fetch_products()
