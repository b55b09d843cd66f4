# Use cases
from .apply_promotion import ApplyPromotionUseCase
from .place_order import PlaceOrderUseCase

__all__ = ['ApplyPromotionUseCase', 'PlaceOrderUseCase']
