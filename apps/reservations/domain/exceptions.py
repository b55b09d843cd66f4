"""
Reservation domain exceptions.
"""
from shared.domain.exceptions import ExternalServiceError, ValidationError

from .value_objects.time_slot_verdict import TimeSlotVerdict


class ReservationTimeRejectedError(ValidationError):
    """Raised when the chosen start time breaks a booking rule."""

    def __init__(self, verdict: TimeSlotVerdict):
        super().__init__(message=verdict.message, field="start_time", code=verdict.code)
        self.verdict = verdict


class InvalidPartySizeError(ValidationError):
    """Raised when the number of guests is outside the accepted range."""

    def __init__(self, party_size, minimum: int, maximum: int):
        super().__init__(
            message=f"Number of guests must be between {minimum} and {maximum}.",
            field="party_size",
            code="INVALID_PARTY_SIZE",
        )
        self.party_size = party_size


class MissingContactInfoError(ValidationError):
    """Raised when the reservation form lacks a required contact field."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, field=field, code="MISSING_CONTACT_INFO")


class ReservationSubmissionError(ExternalServiceError):
    """Raised when the backend rejects or never receives a reservation."""

    def __init__(self, message: str = None, status_code: int = None):
        super().__init__(
            message=message,
            code="RESERVATION_SUBMISSION_FAILED",
            status_code=status_code,
        )
