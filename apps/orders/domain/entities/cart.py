"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

from apps.menu.domain.entities.catalog import Catalog
from shared.domain import AggregateRoot
from ..events.order_placed import OrderPlaced
from .cart_line import ResolvedCartLine


@dataclass(eq=False)
class Cart(AggregateRoot):
    """
    Shopping cart: item id -> quantity.

    A quantity is always >= 1. Decrementing the last unit removes the key, so
    a stored zero never exists.
    """
    _quantities: Dict[int, int] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls) -> 'Cart':
        """Create an empty cart."""
        return cls()

    def increment(self, item_id: int) -> None:
        """Add one unit of an item, inserting it with quantity 1 if absent."""
        self._quantities[item_id] = self._quantities.get(item_id, 0) + 1
        self.touch()

    def decrement(self, item_id: int) -> None:
        """Remove one unit of an item. Absent ids are ignored."""
        quantity = self._quantities.get(item_id)
        if quantity is None:
            return
        if quantity > 1:
            self._quantities[item_id] = quantity - 1
        else:
            del self._quantities[item_id]
        self.touch()

    def clear(self) -> None:
        """Clear all items from the cart."""
        self._quantities.clear()
        self.touch()

    def mark_checked_out(self, order_reference: str, total_amount) -> None:
        """Empty the cart after the backend accepted it as an order."""
        self.add_domain_event(
            OrderPlaced(
                order_reference=order_reference,
                line_count=self.total_distinct_lines(),
                total_amount=total_amount,
            )
        )
        self.clear()

    def quantity_of(self, item_id: int) -> int:
        return self._quantities.get(item_id, 0)

    def total_distinct_lines(self) -> int:
        """Number of distinct items, shown on the cart badge."""
        return len(self._quantities)

    def snapshot(self) -> Mapping[int, int]:
        """Read-only copy of the current quantities."""
        return MappingProxyType(dict(self._quantities))

    def lines(self, catalog: Catalog) -> List[ResolvedCartLine]:
        """
        Join the quantities with the catalog.

        Ids the catalog no longer lists are left out of the result but stay
        in the cart.
        """
        lines = []
        for item_id, quantity in self._quantities.items():
            item = catalog.get(item_id)
            if item is None:
                continue
            lines.append(ResolvedCartLine(item=item, quantity=quantity))
        return lines

    @property
    def total_quantity(self) -> int:
        """Get the total number of units."""
        return sum(self._quantities.values())

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return not self._quantities
