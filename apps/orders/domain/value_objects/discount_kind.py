"""
Discount kind value object.
"""
from enum import Enum


class DiscountKind(str, Enum):
    """How a promotion's value is applied. Values are the backend's codes."""
    PERCENTAGE = "PhanTram"
    FIXED_AMOUNT = "SoTien"

    @classmethod
    def from_code(cls, code: str) -> 'DiscountKind':
        """Anything other than `PhanTram` is treated as a fixed amount."""
        if code == cls.PERCENTAGE.value:
            return cls.PERCENTAGE
        return cls.FIXED_AMOUNT
