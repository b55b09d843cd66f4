"""
Pricing result value object.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from apps.menu.domain.value_objects.money import Money
from shared.domain import ValueObject

if TYPE_CHECKING:
    from ..entities.cart_line import ResolvedCartLine
    from ..entities.promotion import Promotion


@dataclass(frozen=True)
class PricingResult(ValueObject):
    """Checkout figures for one cart state. Recompute after any change."""
    lines: Tuple['ResolvedCartLine', ...]
    subtotal: Money
    discount: Money
    shipping: Money
    grand_total: Money
    promotion: Optional['Promotion'] = None

    @property
    def display_total(self) -> Money:
        """Grand total rounded to a whole dong for display and payment."""
        return self.grand_total.rounded()
