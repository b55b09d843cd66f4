# Value objects
from .discount_kind import DiscountKind
from .fulfillment_mode import FulfillmentMode
from .payment_method import PaymentMethod
from .pricing_result import PricingResult
from .shipping_info import ShippingInfo

__all__ = [
    'DiscountKind',
    'FulfillmentMode',
    'PaymentMethod',
    'PricingResult',
    'ShippingInfo',
]
