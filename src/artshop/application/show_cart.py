"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from artshop.application.cart_store import CartStore
from artshop.application.dto import CartDTO, CartLineItemDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[
                CartLineItemDTO(
                    id=item.id,
                    name=item.name,
                    artist=item.artist,
                    quantity=item.quantity.value,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in self._cart_store.items
            ],
            count=self._cart_store.count,
            total=str(self._cart_store.total),
        )
