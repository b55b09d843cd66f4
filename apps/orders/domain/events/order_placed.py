"""
Order placed domain event.
"""
from dataclasses import dataclass

from apps.menu.domain.value_objects.money import Money
from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when the backend accepts the cart as an order."""
    order_reference: str
    line_count: int
    total_amount: Money
