"""
Customer profile entity.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CustomerProfile:
    """
    The signed-in customer as the backend describes them.

    `raw` keeps the record exactly as received so it can be persisted and
    restored without loss.
    """
    full_name: str = ""
    phone_number: str = ""
    email: str = ""
    address: str = ""
    customer_id: Optional[int] = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def has_contact(self) -> bool:
        return bool(self.full_name or self.phone_number or self.email)
