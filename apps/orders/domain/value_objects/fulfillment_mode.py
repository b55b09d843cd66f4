"""
Fulfillment mode value object.
"""
from enum import Enum


class FulfillmentMode(str, Enum):
    """Whether the order is eaten on premise, picked up, or delivered."""
    DINE_IN = "dine_in"
    PICKUP = "pickup"
    DELIVERY = "delivery"

    @property
    def charges_shipping(self) -> bool:
        return self is FulfillmentMode.DELIVERY
