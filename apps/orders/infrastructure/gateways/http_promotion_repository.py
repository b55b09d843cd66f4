"""
HTTP implementation of PromotionRepository.
"""
import logging
from datetime import date
from typing import List

from shared.infrastructure.http import ApiClient
from ...domain.entities.promotion import Promotion
from ...domain.exceptions import InvalidPromotionDataError
from ...domain.repositories.promotion_repository import PromotionRepository
from ...domain.services.promotion_matcher import active_promotions
from ...interfaces.serializers.promotion_serializer import PromotionSerializer

logger = logging.getLogger(__name__)


class HttpPromotionRepository(PromotionRepository):
    """Reads `/promotions` and keeps the rows active today."""

    def __init__(self, client: ApiClient):
        self.client = client

    def find_active(self, today: date) -> List[Promotion]:
        rows = self.client.get("/promotions") or []
        promotions = []
        for row in rows:
            try:
                promotions.append(self._to_entity(row))
            except InvalidPromotionDataError as e:
                logger.warning(f"Skipping promotion row: {e.message}")
        return active_promotions(promotions, today)

    @staticmethod
    def _to_entity(row: dict) -> Promotion:
        serializer = PromotionSerializer(data=row)
        if not serializer.is_valid():
            raise InvalidPromotionDataError(str(serializer.errors))
        return serializer.to_entity()
