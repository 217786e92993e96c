"""Application service: WhatsApp checkout.

There is no payment step in the storefront.  Checkout turns the cart
into a plain-text order message and a ``wa.me`` deep link that opens a
conversation with the gallery; payment and delivery are arranged there.
The cart is left untouched.
"""

from __future__ import annotations

import re
from decimal import Decimal
from urllib.parse import quote

from artshop.application.add_to_cart import find_product
from artshop.application.cart_store import CartStore
from artshop.application.dto import CheckoutDTO, InquiryDTO
from artshop.domain.exceptions import ValidationError
from artshop.domain.model.product import Product
from artshop.domain.repository.catalog_source import CatalogSource

WHATSAPP_BASE_URL = "https://wa.me/"

# Characters encodeURIComponent leaves alone, besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def whatsapp_link(number: str, message: str) -> str:
    digits = re.sub(r"\D", "", number)
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


def format_mad(amount: Decimal) -> str:
    """Format a price the way the boutique shows it: ``12 500 MAD``."""
    rounded = amount.quantize(Decimal("0.01"))
    text = f"{rounded:,.2f}".replace(",", " ").replace(".", ",")
    if text.endswith(",00"):
        text = text[:-3]
    return f"{text} MAD"


def product_inquiry_message(product: Product) -> str:
    """Message sent from a product card's "ask on WhatsApp" button."""
    return (
        "Bonjour, je suis intéressé(e) par cette œuvre d'art: "
        f"{product.name} (Prix: {format_mad(product.unit_price)}). "
        "Pouvez-vous me donner plus d'informations?"
    )


class CheckoutHandler:

    def __init__(self, cart_store: CartStore, whatsapp_number: str) -> None:
        self._cart_store = cart_store
        self._whatsapp_number = whatsapp_number

    def handle(self) -> CheckoutDTO:
        """Build the order message and deep link for the current cart."""
        if self._cart_store.is_empty:
            raise ValidationError("Cannot check out an empty cart")

        message = self.build_message()
        return CheckoutDTO(
            message=message,
            link=whatsapp_link(self._whatsapp_number, message),
            item_count=self._cart_store.count,
            total=str(self._cart_store.total),
        )

    def build_message(self) -> str:
        lines = ["Hello, I would like to order the following items:", ""]
        for item in self._cart_store.items:
            lines.append(f"• {item.quantity.value}x {item.name} - {item.line_total}")
        lines.append("")
        lines.append(f"Subtotal: {self._cart_store.total}")
        lines.append("")
        lines.append("Please let me know the payment details and delivery options.")
        return "\n".join(lines)


class ProductInquiryHandler:
    """Ask the gallery about a single artwork without adding it to the cart."""

    def __init__(self, source: CatalogSource, whatsapp_number: str) -> None:
        self._source = source
        self._whatsapp_number = whatsapp_number

    def handle(self, product_ref: str) -> InquiryDTO:
        product = find_product(self._source, product_ref)
        message = product_inquiry_message(product)
        return InquiryDTO(
            product_id=product.id,
            message=message,
            link=whatsapp_link(self._whatsapp_number, message),
        )
