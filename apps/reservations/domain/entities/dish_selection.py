"""
Dish selection entity (reservation pre-order sub-cart).
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from apps.menu.domain.entities.catalog import Catalog
from apps.menu.domain.value_objects.money import Money


@dataclass(frozen=True)
class DishSelectionEntry:
    """A committed dish, with name, price and image copied at commit time."""
    item_id: int
    quantity: int
    name: str
    price: Money
    image: str = ""

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"Dish {self.item_id} must have a quantity of at least 1")

    @property
    def line_total(self) -> Money:
        return self.price.multiply(self.quantity)


class DishSelection:
    """
    Dishes pre-ordered with a table reservation.

    Editing happens on a scratch copy while the picker is open. `commit()`
    replaces the committed list with the scratch quantities; `discard()`
    throws the scratch away and leaves the committed list as it was.
    """

    def __init__(self):
        self._committed: Tuple[DishSelectionEntry, ...] = ()
        self._scratch: Optional[Dict[int, int]] = None

    @property
    def committed(self) -> Tuple[DishSelectionEntry, ...]:
        return self._committed

    @property
    def is_picking(self) -> bool:
        return self._scratch is not None

    def open_picker(self) -> None:
        """Start editing from the currently committed dishes."""
        self._scratch = {entry.item_id: entry.quantity for entry in self._committed}

    def adjust_quantity(self, item_id: int, delta: int) -> None:
        """Change a scratch quantity; reaching zero removes the dish."""
        if self._scratch is None:
            self.open_picker()
        quantity = self._scratch.get(item_id, 0) + delta
        if quantity <= 0:
            self._scratch.pop(item_id, None)
        else:
            self._scratch[item_id] = quantity

    def scratch_quantity(self, item_id: int) -> int:
        if self._scratch is None:
            return 0
        return self._scratch.get(item_id, 0)

    def commit(self, catalog: Catalog) -> Tuple[DishSelectionEntry, ...]:
        """
        Snapshot the scratch quantities against the catalog.

        Entries follow menu order. Ids the catalog does not list are dropped.
        Committing with the picker closed keeps the current list.
        """
        if self._scratch is None:
            return self._committed

        self._committed = tuple(
            DishSelectionEntry(
                item_id=item.id,
                quantity=self._scratch[item.id],
                name=item.name,
                price=item.price,
                image=item.image,
            )
            for item in catalog
            if self._scratch.get(item.id, 0) > 0
        )
        self._scratch = None
        return self._committed

    def discard(self) -> None:
        self._scratch = None

    def remove_committed(self, item_id: int) -> None:
        self._committed = tuple(
            entry for entry in self._committed if entry.item_id != item_id
        )

    def clear(self) -> None:
        self._committed = ()
        self._scratch = None

    @property
    def total(self) -> Money:
        """Sum of snapshot price times quantity over the committed dishes."""
        total = Money.zero()
        for entry in self._committed:
            total = total.add(entry.line_total)
        return total

    @property
    def dish_count(self) -> int:
        return len(self._committed)

    def __iter__(self):
        return iter(self._committed)
