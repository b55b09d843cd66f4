"""
Auth gateway interface.
"""
from abc import ABC, abstractmethod


class AuthGateway(ABC):
    """Abstract gateway to the backend login endpoint."""

    @abstractmethod
    def login(self, username: str, password: str) -> dict:
        """Return the backend's `{token, user}` record."""
        pass
