# DTOs
from .reservation_dto import ReservationReceiptDTO, SubmitReservationDTO

__all__ = ['SubmitReservationDTO', 'ReservationReceiptDTO']
