"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artshop.domain.model.cart import CartLineItem


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLineItem] | None:
        """Return the persisted line items, or None if nothing was saved.

        Raises CorruptCartDataError if the stored payload cannot be decoded.
        """

    @abstractmethod
    def save(self, items: list[CartLineItem]) -> None:
        """Replace the persisted line items."""
