"""
Catalog repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.catalog import Catalog


class CatalogRepository(ABC):
    """Abstract source of the menu."""

    @abstractmethod
    def fetch(self) -> Catalog:
        """Return the current menu as a fresh Catalog."""
        pass

    @abstractmethod
    def invalidate(self) -> None:
        """Forget any cached copy so the next fetch hits the source."""
        pass
