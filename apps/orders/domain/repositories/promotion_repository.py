"""
Promotion repository interface.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List

from ..entities.promotion import Promotion


class PromotionRepository(ABC):
    """Abstract source of promotions."""

    @abstractmethod
    def find_active(self, today: date) -> List[Promotion]:
        """Promotions whose validity window contains `today`."""
        pass
