"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    ExternalServiceError,
    ValidationError,
)


class EmptyCartError(ValidationError):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Your cart is empty. Add a dish before ordering.",
            field="cart",
            code="EMPTY_CART",
        )


class EmptyPromotionCodeError(ValidationError):
    """Raised when a promotion code is applied without typing one."""

    def __init__(self):
        super().__init__(
            message="Please enter a promotion code.",
            field="promotion_code",
            code="EMPTY_PROMOTION_CODE",
        )


class PromotionNotFoundError(ValidationError):
    """Raised when no active promotion carries the entered code."""

    def __init__(self, code: str):
        super().__init__(
            message=f"No active promotion matches the code '{code}'.",
            field="promotion_code",
            code="PROMOTION_NOT_FOUND",
        )
        self.promotion_code = code


class MissingShippingInfoError(ValidationError):
    """Raised when a delivery order lacks a phone number or address."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, field=field, code="MISSING_SHIPPING_INFO")


class InvalidPromotionDataError(DomainException):
    """Raised when the promotion feed returns a row that cannot be used."""

    def __init__(self, detail: str):
        super().__init__(
            message=f"Invalid promotion data: {detail}",
            code="INVALID_PROMOTION_DATA",
        )


class OrderSubmissionError(ExternalServiceError):
    """Raised when the backend rejects or never receives an order."""

    def __init__(self, message: str = None, status_code: int = None):
        super().__init__(
            message=message,
            code="ORDER_SUBMISSION_FAILED",
            status_code=status_code,
        )
