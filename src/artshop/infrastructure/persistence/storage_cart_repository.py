"""CartRepository that keeps the cart as a JSON string in a KeyValueStorage.

The stored value is a JSON array of line items, the same shape the
storefront writes to the browser's localStorage under ``"cart"``:

    [{"id": "12", "name": "Blue Nature", "price": "300", "quantity": 2,
      "image": "/uploads/blue.jpg", "artist": "Amal"}]

Prices are written as strings to keep them exact; numbers are accepted
on read.
"""

from __future__ import annotations

import json

from artshop.domain.exceptions import CorruptCartDataError, DomainException
from artshop.domain.model.cart import CartLineItem
from artshop.domain.model.value_objects import Money, Quantity
from artshop.domain.repository.cart_repository import CartRepository
from artshop.domain.repository.key_value_storage import KeyValueStorage

CART_STORAGE_KEY = "cart"


class StorageCartRepository(CartRepository):

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLineItem] | None:
        payload = self._storage.get(self._key)
        if payload is None:
            return None
        try:
            records = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise CorruptCartDataError(f"Cart payload is not valid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise CorruptCartDataError(
                f"Cart payload must be a JSON array, got {type(records).__name__}"
            )
        try:
            return [self._to_domain(raw) for raw in records]
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise CorruptCartDataError(f"Malformed cart line item: {exc}") from exc

    def save(self, items: list[CartLineItem]) -> None:
        self._storage.set(self._key, json.dumps([self._to_raw(item) for item in items]))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartLineItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "price": str(item.price.amount),
            "quantity": item.quantity.value,
            "image": item.image,
            "artist": item.artist,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLineItem:
        return CartLineItem(
            id=str(raw["id"]),
            name=raw["name"],
            price=Money.of(raw["price"]),
            quantity=Quantity(raw["quantity"]),
            image=raw.get("image") or "",
            artist=raw.get("artist") or None,
        )
