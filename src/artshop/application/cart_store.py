"""Application service: the shopper's cart for one browsing session.

CartStore wraps the Cart aggregate with the persistence contract:

- ``hydrate()`` loads the saved cart once.  Missing or corrupt data is
  logged and the cart starts empty; it is never an error for the shopper.
- Every mutation after hydration writes the cart back.  Nothing is
  written before hydration, so an empty in-memory cart can never
  overwrite a saved one that has not been read yet.
- Write failures are logged; the in-memory cart stays authoritative.

The store is created by the composition root and handed to whoever
needs it.  Listeners registered with ``subscribe()`` are called after
every mutation so displays can refresh.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from artshop.domain.exceptions import CorruptCartDataError
from artshop.domain.model.cart import Cart, CartItemSnapshot, CartLineItem
from artshop.domain.model.value_objects import Money
from artshop.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)

CartListener = Callable[["CartStore"], None]


class CartStore:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo
        self._cart = Cart()
        self._hydrated = False
        self._lock = threading.RLock()
        self._listeners: list[CartListener] = []

    # --- Lifecycle ------------------------------------------------------------

    def hydrate(self) -> None:
        """Load the persisted cart. Only the first call has any effect."""
        with self._lock:
            if self._hydrated:
                return
            try:
                saved = self._cart_repo.load()
            except CorruptCartDataError as exc:
                logger.warning("Error parsing cart data, starting with an empty cart: %s", exc)
                saved = None
            except OSError as exc:
                logger.warning("Could not read saved cart, starting with an empty cart: %s", exc)
                saved = None

            if saved is not None:
                self._cart = Cart(list(saved))
            self._hydrated = True
            logger.debug("Cart hydrated with %d line item(s)", len(self._cart.items))
            self._persist()

    @property
    def is_hydrated(self) -> bool:
        return self._hydrated

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, item: CartItemSnapshot) -> None:
        with self._lock:
            self._cart.add(item)
            self._commit()

    def remove_from_cart(self, product_id: str) -> None:
        with self._lock:
            self._cart.remove(product_id)
            self._commit()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set an absolute quantity; values below 1 are ignored."""
        if quantity < 1:
            return
        with self._lock:
            self._cart.update_quantity(product_id, quantity)
            self._commit()

    def clear_cart(self) -> None:
        with self._lock:
            self._cart.clear()
            self._commit()

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[CartLineItem]:
        with self._lock:
            return list(self._cart.items)

    @property
    def count(self) -> int:
        with self._lock:
            return self._cart.count

    @property
    def total(self) -> Money:
        with self._lock:
            return self._cart.total

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return self._cart.is_empty

    def find(self, product_id: str) -> CartLineItem | None:
        with self._lock:
            return self._cart.find(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> None:
        self._persist()
        for listener in list(self._listeners):
            listener(self)

    def _persist(self) -> None:
        if not self._hydrated:
            return
        try:
            self._cart_repo.save(list(self._cart.items))
        except OSError as exc:
            logger.warning("Could not save cart, keeping it in memory only: %s", exc)
