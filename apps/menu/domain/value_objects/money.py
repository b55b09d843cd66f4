"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from shared.domain import ValueObject, to_decimal

Number = Union[Decimal, int, str, float]

_UNIT = Decimal('1')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object with currency.

    VND has no minor unit, so `rounded()` snaps to the nearest whole dong,
    halves rounding up.
    """
    amount: Decimal
    currency: str = "VND"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            self._coerce('amount', to_decimal(self.amount))

    @classmethod
    def zero(cls, currency: str = "VND") -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        """Subtract money value."""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Number) -> 'Money':
        """Multiply money by a quantity or a rate."""
        return Money(amount=self.amount * to_decimal(factor), currency=self.currency)

    def percent(self, rate: Number) -> 'Money':
        """Take `rate` percent of this amount."""
        return Money(amount=self.amount * to_decimal(rate) / Decimal('100'), currency=self.currency)

    def rounded(self) -> 'Money':
        """Round half-up to a whole currency unit."""
        return Money(amount=self.amount.quantize(_UNIT, rounding=ROUND_HALF_UP), currency=self.currency)

    def min(self, other: 'Money') -> 'Money':
        self._check_currency(other)
        return self if self.amount <= other.amount else other

    def floor_at_zero(self) -> 'Money':
        if self.amount < 0:
            return Money.zero(self.currency)
        return self

    @property
    def formatted(self) -> str:
        """Get formatted money string, e.g. `130.000 ₫`."""
        if self.currency == "VND":
            whole = int(self.rounded().amount)
            return f"{whole:,} ₫".replace(',', '.')
        return f"{self.currency} {self.amount:,.2f}"

    def _check_currency(self, other: 'Money') -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine different currencies")
