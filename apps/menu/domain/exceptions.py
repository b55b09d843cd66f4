"""
Menu domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ExternalServiceError


class FoodItemNotFoundError(EntityNotFoundError):
    """Raised when an item id is not on the current menu."""

    def __init__(self, item_id: int):
        super().__init__(entity_name="Food item", entity_id=str(item_id))
        self.item_id = item_id


class CatalogUnavailableError(ExternalServiceError):
    """Raised when the menu cannot be fetched."""

    def __init__(self, message: str = None):
        super().__init__(
            message=message or "The menu is unavailable right now. Please try again.",
            code="CATALOG_UNAVAILABLE",
        )
