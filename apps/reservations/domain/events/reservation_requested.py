"""
Reservation requested domain event.
"""
from dataclasses import dataclass
from datetime import datetime

from shared.domain import DomainEvent


@dataclass(frozen=True)
class ReservationRequested(DomainEvent):
    """Event raised when the backend accepts a table reservation."""
    reservation_reference: str
    start_time: datetime
    party_size: int
    dish_count: int
