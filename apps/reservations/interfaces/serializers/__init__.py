from .reservation_serializer import ReservationDishSerializer, ReservationSubmissionSerializer

__all__ = ['ReservationDishSerializer', 'ReservationSubmissionSerializer']
