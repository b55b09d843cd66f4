# DTOs
from .order_dto import ApplyPromotionDTO, OrderReceiptDTO, PlaceOrderDTO

__all__ = ['PlaceOrderDTO', 'OrderReceiptDTO', 'ApplyPromotionDTO']
