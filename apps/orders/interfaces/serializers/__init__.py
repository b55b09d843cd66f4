# Serializers
from .cart_serializer import CartLineSerializer, CartSummarySerializer
from .order_serializer import OrderLineSerializer, OrderSubmissionSerializer, ShippingInfoSerializer
from .promotion_serializer import PromotionSerializer

__all__ = [
    'CartLineSerializer',
    'CartSummarySerializer',
    'OrderLineSerializer',
    'OrderSubmissionSerializer',
    'ShippingInfoSerializer',
    'PromotionSerializer',
]
