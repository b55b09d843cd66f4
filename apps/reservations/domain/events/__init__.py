# Domain events
from .reservation_requested import ReservationRequested

__all__ = ['ReservationRequested']
