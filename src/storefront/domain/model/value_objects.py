"""Value Objects shared across the domain.

Immutable, compared by value, and validated on construction so an invalid
price or quantity can never reach an order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """A non-negative monetary amount.

    Backed by Decimal so order totals are exact sums of their lines.
    Amounts are whole cents, so the two-decimal wire format never rounds.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        if self.amount != self.amount.quantize(_CENT):
            raise ValidationError(
                f"Money amount cannot carry fractions of a cent, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce to Decimal through ``str`` so floats keep their printed value."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def sum(amounts) -> Money:
        total = Money.zero()
        for amount in amounts:
            total = total + amount
        return total


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    @staticmethod
    def clamped(raw: object) -> Quantity:
        """Parse loosely and floor to 1, the way cart input is normalized."""
        try:
            value = int(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            value = 1
        return Quantity(max(1, value))

    def __str__(self) -> str:
        return str(self.value)
