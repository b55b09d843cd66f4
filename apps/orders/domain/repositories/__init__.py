# Repositories
from .order_gateway import OrderGateway
from .promotion_repository import PromotionRepository

__all__ = ['OrderGateway', 'PromotionRepository']
