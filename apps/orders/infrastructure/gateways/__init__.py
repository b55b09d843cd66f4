from .http_order_gateway import HttpOrderGateway
from .http_promotion_repository import HttpPromotionRepository

__all__ = ['HttpOrderGateway', 'HttpPromotionRepository']
