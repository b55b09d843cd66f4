"""
Shipping info value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import MissingShippingInfoError


@dataclass(frozen=True)
class ShippingInfo(ValueObject):
    """Where and whom to deliver to."""
    address: str = ""
    phone_number: str = ""

    def __post_init__(self):
        self._coerce('address', (self.address or "").strip())
        self._coerce('phone_number', (self.phone_number or "").strip())

    def require_complete(self) -> None:
        """Delivery orders need both a phone number and an address."""
        if not self.phone_number:
            raise MissingShippingInfoError("phone_number", "Please enter a phone number.")
        if not self.address:
            raise MissingShippingInfoError("address", "Please enter a delivery address.")
