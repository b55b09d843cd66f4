"""
Reservation gateway interface.
"""
from abc import ABC, abstractmethod


class ReservationGateway(ABC):
    """Abstract gateway to the public reservation endpoint."""

    @abstractmethod
    def submit(self, payload: dict) -> dict:
        """Send a reservation payload and return what the backend created."""
        pass
