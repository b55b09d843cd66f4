# Repository interfaces
from .reservation_gateway import ReservationGateway

__all__ = ['ReservationGateway']
