"""
HTTP implementation of CatalogRepository.
"""
import logging
from typing import List, Optional

from django.conf import settings

from shared.domain.exceptions import ExternalServiceError
from shared.infrastructure.cache import JsonCache
from shared.infrastructure.http import ApiClient
from ...domain.entities.catalog import Catalog
from ...domain.entities.food_item import FoodItem
from ...domain.exceptions import CatalogUnavailableError
from ...domain.repositories.catalog_repository import CatalogRepository
from ...interfaces.serializers.food_item_serializer import (
    FoodItemOutputSerializer,
    FoodItemSerializer,
)

logger = logging.getLogger(__name__)


class HttpCatalogRepository(CatalogRepository):
    """Reads `/menu`, caching the normalized rows in the Django cache."""

    CACHE_KEY = "items"

    def __init__(self, client: ApiClient, cache: Optional[JsonCache] = None,
                 timeout: Optional[int] = None):
        self.client = client
        self.cache = cache or JsonCache(prefix="catalog")
        self.timeout = timeout if timeout is not None else settings.CATALOG_CACHE_TIMEOUT

    def fetch(self) -> Catalog:
        rows = self.cache.get(self.CACHE_KEY)
        if rows is None:
            rows = self._fetch_rows()
            self.cache.set(self.CACHE_KEY, rows, self.timeout)
        return Catalog(self._to_items(rows))

    def invalidate(self) -> None:
        self.cache.delete(self.CACHE_KEY)

    def _fetch_rows(self) -> List[dict]:
        try:
            data = self.client.get("/menu")
        except ExternalServiceError as e:
            raise CatalogUnavailableError() from e

        items = self._to_items(data or [])
        logger.info(f"Fetched {len(items)} menu items")
        return [FoodItemOutputSerializer(item).data for item in items]

    @staticmethod
    def _to_items(rows) -> List[FoodItem]:
        items = []
        for row in rows:
            serializer = FoodItemSerializer(data=row)
            if not serializer.is_valid():
                logger.warning(f"Skipping malformed menu row {row!r}: {serializer.errors}")
                continue
            items.append(serializer.to_entity())
        return items
