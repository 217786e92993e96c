"""Tests for the WhatsApp checkout hand-off."""

from decimal import Decimal
from urllib.parse import unquote

import pytest

from artshop.application.cart_store import CartStore
from artshop.application.checkout import (
    CheckoutHandler,
    ProductInquiryHandler,
    format_mad,
    product_inquiry_message,
    whatsapp_link,
)
from artshop.domain.exceptions import EntityNotFoundError, ValidationError
from artshop.domain.model.cart import CartItemSnapshot
from artshop.domain.model.product import Product
from artshop.domain.model.value_objects import Money
from artshop.infrastructure.persistence.storage_cart_repository import StorageCartRepository
from tests.fakes import FakeCatalogSource, FakeStorage


def _cart() -> CartStore:
    store = CartStore(StorageCartRepository(FakeStorage()))
    store.hydrate()
    return store


class TestCheckoutHandler:

    def test_message_lists_every_line_and_subtotal(self):
        store = _cart()
        store.add_to_cart(CartItemSnapshot(id="1", name="Blue Nature", price=Money.of("1500")))
        store.add_to_cart(CartItemSnapshot(id="1", name="Blue Nature", price=Money.of("1500")))
        store.add_to_cart(CartItemSnapshot(id="2", name="Red Dunes", price=Money.of("99.5")))

        dto = CheckoutHandler(store, "+212600000000").handle()

        assert dto.message == (
            "Hello, I would like to order the following items:\n"
            "\n"
            "• 2x Blue Nature - $3,000.00\n"
            "• 1x Red Dunes - $99.50\n"
            "\n"
            "Subtotal: $3,099.50\n"
            "\n"
            "Please let me know the payment details and delivery options."
        )
        assert dto.item_count == 3
        assert dto.total == "$3,099.50"

    def test_link_targets_configured_number(self):
        store = _cart()
        store.add_to_cart(CartItemSnapshot(id="1", name="Blue Nature", price=Money.of("10")))
        dto = CheckoutHandler(store, "+212600000000").handle()
        assert dto.link.startswith("https://wa.me/212600000000?text=")
        assert unquote(dto.link.split("?text=", 1)[1]) == dto.message

    def test_checkout_leaves_cart_untouched(self):
        store = _cart()
        store.add_to_cart(CartItemSnapshot(id="1", name="Blue Nature", price=Money.of("10")))
        CheckoutHandler(store, "+212600000000").handle()
        assert store.count == 1

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="empty cart"):
            CheckoutHandler(_cart(), "+212600000000").handle()


class TestProductInquiryHandler:

    def _source(self) -> FakeCatalogSource:
        return FakeCatalogSource(
            [Product(id="3", name="Blue Nature", price="4500", category_id="B", slug="blue-nature")]
        )

    def test_inquiry_by_slug(self):
        dto = ProductInquiryHandler(self._source(), "+212600000000").handle("blue-nature")
        assert dto.product_id == "3"
        assert dto.link.startswith("https://wa.me/212600000000?text=Bonjour")
        assert unquote(dto.link.split("?text=", 1)[1]) == dto.message

    def test_unknown_artwork(self):
        with pytest.raises(EntityNotFoundError):
            ProductInquiryHandler(self._source(), "+212600000000").handle("missing")


class TestHelpers:

    def test_whatsapp_link_encodes_like_encode_uri_component(self):
        link = whatsapp_link("+212 600", "Hi (you)! 50% & more\n")
        assert link == "https://wa.me/212600?text=Hi%20(you)!%2050%25%20%26%20more%0A"

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("12500"), "12 500 MAD"),
            (Decimal("999.50"), "999,50 MAD"),
            (Decimal("0"), "0 MAD"),
        ],
    )
    def test_format_mad(self, amount, expected):
        assert format_mad(amount) == expected

    def test_product_inquiry_message(self):
        product = Product(id="3", name="Blue Nature", price="4500", category_id="B")
        message = product_inquiry_message(product)
        assert "Blue Nature" in message
        assert "(Prix: 4 500 MAD)" in message
        assert message.startswith("Bonjour")
