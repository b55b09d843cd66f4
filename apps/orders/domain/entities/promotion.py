"""
Promotion entity.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from apps.menu.domain.value_objects.money import Money
from ..value_objects.discount_kind import DiscountKind


@dataclass(frozen=True)
class Promotion:
    """A time-windowed discount rule, redeemed by code."""
    id: int
    name: str
    kind: DiscountKind
    value: Decimal
    start_date: date
    end_date: date
    code: Optional[str] = None

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("Discount value cannot be negative")
        if self.kind is DiscountKind.PERCENTAGE and self.value > 100:
            raise ValueError("Percentage discount cannot exceed 100")

    def is_active_on(self, day: date) -> bool:
        """Both ends of the window are inclusive."""
        return self.start_date <= day <= self.end_date

    def matches_code(self, entered: str) -> bool:
        if not self.code:
            return False
        return self.code.strip().casefold() == entered.strip().casefold()

    def discount_for(self, subtotal: Money) -> Money:
        """
        Discount this promotion grants on `subtotal`, never more than the
        subtotal itself.
        """
        if self.kind is DiscountKind.PERCENTAGE:
            discount = subtotal.percent(self.value)
        else:
            discount = Money(amount=self.value, currency=subtotal.currency)
        return discount.min(subtotal)

    @property
    def label(self) -> str:
        """Short human label, e.g. `10%` or `50.000 ₫`."""
        if self.kind is DiscountKind.PERCENTAGE:
            return f"{self.value.normalize():f}%"
        return Money(amount=self.value).formatted
