"""
Catalog entity.
"""
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from ..exceptions import FoodItemNotFoundError
from .food_item import FoodItem


class Catalog:
    """
    Read-only menu snapshot keyed by item id.

    A catalog is built once per fetch; refreshing the menu means building a
    new Catalog, never mutating this one. Iteration keeps the fetch order.
    """

    def __init__(self, items: Iterable[FoodItem] = ()):
        by_id = {}
        for item in items:
            by_id[item.id] = item
        self._items: Mapping[int, FoodItem] = MappingProxyType(by_id)

    @classmethod
    def empty(cls) -> 'Catalog':
        return cls()

    def get(self, item_id: int) -> Optional[FoodItem]:
        return self._items.get(item_id)

    def require(self, item_id: int) -> FoodItem:
        """Get an item or raise FoodItemNotFoundError."""
        item = self._items.get(item_id)
        if item is None:
            raise FoodItemNotFoundError(item_id)
        return item

    def __getitem__(self, item_id: int) -> FoodItem:
        return self._items[item_id]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)
