"""
Reservation DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union

from apps.menu.domain.value_objects.money import Money
from ...domain.entities.dish_selection import DishSelectionEntry


@dataclass
class SubmitReservationDTO:
    """DTO for the reservation form fields."""
    full_name: str
    phone_number: str
    email: str
    start_time: Union[str, datetime, None]
    party_size: int = 2
    note: str = ""


@dataclass
class ReservationReceiptDTO:
    """DTO for an accepted reservation."""
    reservation_id: Optional[int]
    start_time: datetime
    party_size: int
    dishes: Tuple[DishSelectionEntry, ...]
    dish_total: Money
    table_name: Optional[str] = None
    backend_payload: dict = field(default_factory=dict, repr=False)
