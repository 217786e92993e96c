"""Cart aggregate — the line items a shopper intends to purchase.

The Cart owns an ordered list of line items keyed by product id.
Insertion order is display order: the first product added stays first
unless it is removed and added again.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from artshop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItemSnapshot:
    """Product details captured when the shopper presses "Add to cart"."""

    id: str
    name: str
    price: Money
    image: str = ""
    artist: str | None = None


@dataclass(frozen=True)
class CartLineItem:
    """One product in the cart together with how many units are wanted.

    ``name``, ``price``, ``image`` and ``artist`` are a snapshot taken the
    first time the product was added; later adds only bump the quantity.
    """

    id: str
    name: str
    price: Money
    quantity: Quantity
    image: str = ""
    artist: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value

    @staticmethod
    def from_snapshot(snapshot: CartItemSnapshot) -> CartLineItem:
        return CartLineItem(
            id=snapshot.id,
            name=snapshot.name,
            price=snapshot.price,
            quantity=Quantity(1),
            image=snapshot.image,
            artist=snapshot.artist,
        )


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one line item per product ``id``
    - every quantity is >= 1
    """

    items: list[CartLineItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Lines loaded from storage may repeat an id; fold them into the
        # first occurrence, keeping its snapshot.
        merged: dict[str, CartLineItem] = {}
        for item in self.items:
            first = merged.get(item.id)
            if first is None:
                merged[item.id] = item
            else:
                merged[item.id] = replace(
                    first, quantity=Quantity(first.quantity.value + item.quantity.value)
                )
        self.items = list(merged.values())

    # --- Mutations ------------------------------------------------------------

    def add(self, snapshot: CartItemSnapshot) -> None:
        """Add one unit of a product.

        A product already in the cart keeps its original snapshot and
        gains one unit; a new product is appended with quantity 1.
        """
        for i, item in enumerate(self.items):
            if item.id == snapshot.id:
                self.items[i] = replace(item, quantity=item.quantity.incremented())
                return
        self.items.append(CartLineItem.from_snapshot(snapshot))

    def remove(self, product_id: str) -> bool:
        """Drop the line for *product_id*. Returns False if it was absent."""
        before = len(self.items)
        self.items = [item for item in self.items if item.id != product_id]
        return len(self.items) != before

    def update_quantity(self, product_id: str, quantity: int) -> bool:
        """Set an absolute quantity.

        Values below 1 are ignored rather than clamped; removing a line
        goes through ``remove()``. Returns True if a line changed.
        """
        if quantity < 1:
            return False
        for i, item in enumerate(self.items):
            if item.id == product_id:
                self.items[i] = replace(item, quantity=Quantity(quantity))
                return True
        return False

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    @property
    def count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def total(self) -> Money:
        return Money.sum(item.line_total for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, product_id: str) -> CartLineItem | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None
