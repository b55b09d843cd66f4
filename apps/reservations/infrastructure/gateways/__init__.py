from .http_reservation_gateway import HttpReservationGateway

__all__ = ['HttpReservationGateway']
