"""Value Objects for prices and cart quantities.

Artwork prices arrive as strings from the storefront API; once a price
enters a cart line it is held as Money so line totals and the cart
subtotal are exact Decimal sums.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from artshop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """A non-negative, finite amount in a single currency."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | float | int | Decimal) -> Money:
        """Parse *amount* as it appears in product records and cart storage."""
        try:
            return cls(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    @classmethod
    def sum(cls, amounts: Iterable[Money]) -> Money:
        result = cls.zero()
        for amount in amounts:
            result = result + amount
        return result

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot add {other.currency} to {self.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, quantity: int) -> Money:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"Money can only be scaled by a quantity, got {type(quantity).__name__}")
        return Money(self.amount * quantity, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:,.2f}"


@dataclass(frozen=True)
class Quantity:
    """Units of one artwork in a cart line; always at least 1.

    Dropping a line to zero is a removal, not a quantity update.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be at least 1, got {self.value}")

    def incremented(self) -> Quantity:
        return Quantity(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)
