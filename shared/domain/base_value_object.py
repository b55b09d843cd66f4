"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def _coerce(self, name: str, value: Any) -> None:
        """Replace an attribute on the frozen instance during __post_init__."""
        object.__setattr__(self, name, value)


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a number or numeric string coming off the wire into a Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a monetary value: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a monetary value: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a monetary value: {value!r}")
    return result
