"""
Food item entity.
"""
from dataclasses import dataclass

from ..value_objects.money import Money


@dataclass(frozen=True)
class FoodItem:
    """A dish on the menu, as fetched. Never edited in place."""
    id: int
    name: str
    price: Money
    category: str = ""
    image: str = ""

    def __post_init__(self):
        if self.price.amount < 0:
            raise ValueError(f"Food item {self.id} has a negative price")

    @property
    def rounded_price(self) -> Money:
        """Unit price snapped to a whole dong, the basis of every line total."""
        return self.price.rounded()
