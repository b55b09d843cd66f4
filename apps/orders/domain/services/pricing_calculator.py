"""
Checkout pricing.
"""
from decimal import Decimal
from typing import Optional

from apps.menu.domain.entities.catalog import Catalog
from apps.menu.domain.value_objects.money import Money
from ..entities.cart import Cart
from ..entities.promotion import Promotion
from ..value_objects.fulfillment_mode import FulfillmentMode
from ..value_objects.pricing_result import PricingResult

DEFAULT_SHIPPING_FEE = Decimal('20000')


class PricingCalculator:
    """
    Computes subtotal, discount, shipping and grand total for a cart.

    Unit prices are rounded to a whole dong before being multiplied by the
    quantity; changing that order changes totals.
    """

    def __init__(self, shipping_fee: Decimal = DEFAULT_SHIPPING_FEE):
        self.shipping_fee = Money(amount=shipping_fee)

    def calculate(
        self,
        cart: Cart,
        catalog: Catalog,
        promotion: Optional[Promotion] = None,
        mode: FulfillmentMode = FulfillmentMode.PICKUP,
    ) -> PricingResult:
        lines = tuple(cart.lines(catalog))

        subtotal = Money.zero()
        for line in lines:
            subtotal = subtotal.add(line.line_total)

        discount = promotion.discount_for(subtotal) if promotion else Money.zero()
        shipping = self.shipping_fee if mode.charges_shipping else Money.zero()
        grand_total = subtotal.subtract(discount).floor_at_zero().add(shipping)

        return PricingResult(
            lines=lines,
            subtotal=subtotal,
            discount=discount,
            shipping=shipping,
            grand_total=grand_total,
            promotion=promotion,
        )
