"""
Resolved cart line.
"""
from dataclasses import dataclass

from apps.menu.domain.entities.food_item import FoodItem
from apps.menu.domain.value_objects.money import Money


@dataclass(frozen=True)
class ResolvedCartLine:
    """A cart entry joined with its menu item. Derived on every read."""
    item: FoodItem
    quantity: int

    @property
    def item_id(self) -> int:
        return self.item.id

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def unit_price(self) -> Money:
        return self.item.rounded_price

    @property
    def line_total(self) -> Money:
        """Unit price rounded first, then multiplied by the quantity."""
        return self.item.rounded_price.multiply(self.quantity)
