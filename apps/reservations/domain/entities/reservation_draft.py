"""
Reservation draft entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from shared.domain import AggregateRoot
from ..events.reservation_requested import ReservationRequested
from ..exceptions import InvalidPartySizeError, MissingContactInfoError
from .dish_selection import DishSelection

DEFAULT_PARTY_SIZE = 2


@dataclass(eq=False)
class ReservationDraft(AggregateRoot):
    """
    The table reservation form while the customer fills it in.

    Contact fields may be pre-filled from the signed-in profile. Dishes are
    optional and managed through `dishes`.
    """
    full_name: str = ""
    phone_number: str = ""
    email: str = ""
    start_time: Union[str, datetime, None] = None
    party_size: int = DEFAULT_PARTY_SIZE
    note: str = ""
    dishes: DishSelection = field(default_factory=DishSelection, repr=False)

    def prefill_contact(self, full_name: str = "", phone_number: str = "", email: str = "") -> None:
        """Fill blank contact fields; anything the customer typed is kept."""
        if not self.full_name.strip():
            self.full_name = full_name or ""
        if not self.phone_number.strip():
            self.phone_number = phone_number or ""
        if not self.email.strip():
            self.email = email or ""
        self.touch()

    def require_contact(self) -> None:
        if not self.full_name.strip():
            raise MissingContactInfoError("full_name", "Please enter your name.")
        if not self.phone_number.strip():
            raise MissingContactInfoError("phone_number", "Please enter a phone number.")
        if not self.email.strip():
            raise MissingContactInfoError("email", "Please enter an email address.")

    def require_party_size(self, minimum: int = 1, maximum: int = 20) -> int:
        try:
            size = int(self.party_size)
        except (TypeError, ValueError):
            raise InvalidPartySizeError(self.party_size, minimum, maximum)
        if not minimum <= size <= maximum:
            raise InvalidPartySizeError(self.party_size, minimum, maximum)
        return size

    def mark_submitted(self, reservation_reference: str, start_time: datetime) -> None:
        """Record the accepted reservation and reset the form for the next one."""
        self.add_domain_event(
            ReservationRequested(
                reservation_reference=reservation_reference,
                start_time=start_time,
                party_size=int(self.party_size),
                dish_count=self.dishes.dish_count,
            )
        )
        self.reset()

    def reset(self) -> None:
        self.full_name = ""
        self.phone_number = ""
        self.email = ""
        self.start_time = None
        self.party_size = DEFAULT_PARTY_SIZE
        self.note = ""
        self.dishes.clear()
        self.touch()