"""
Order submission gateway interface.
"""
from abc import ABC, abstractmethod


class OrderGateway(ABC):
    """Sends a finished order to the backend."""

    @abstractmethod
    def submit(self, payload: dict) -> dict:
        """
        Submit an order payload and return the created order.

        Raises OrderSubmissionError when the backend refuses it.
        """
        pass
