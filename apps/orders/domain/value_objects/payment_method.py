"""
Payment method value object.
"""
from enum import Enum


class PaymentMethod(str, Enum):
    """Payment methods accepted at checkout."""
    CASH_ON_DELIVERY = "cod"
    BANK_TRANSFER = "banking"
