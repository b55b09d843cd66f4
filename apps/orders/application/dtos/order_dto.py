"""
Order DTOs.
"""
from dataclasses import dataclass, field
from typing import Optional

from ...domain.value_objects.fulfillment_mode import FulfillmentMode
from ...domain.value_objects.payment_method import PaymentMethod
from ...domain.value_objects.pricing_result import PricingResult


@dataclass
class PlaceOrderDTO:
    """DTO for the checkout form."""
    phone_number: str = ""
    address: str = ""
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    mode: FulfillmentMode = FulfillmentMode.DELIVERY
    customer_id: Optional[int] = None


@dataclass
class OrderReceiptDTO:
    """DTO for an accepted order."""
    order_id: Optional[int]
    pricing: PricingResult
    payment_method: PaymentMethod
    payment_qr_url: Optional[str] = None
    backend_payload: dict = field(default_factory=dict, repr=False)

    @property
    def total(self):
        return self.pricing.display_total


@dataclass
class ApplyPromotionDTO:
    """DTO for a typed promotion code."""
    code: str
