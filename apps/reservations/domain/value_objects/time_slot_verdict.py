"""
Reservation time verdict value object.
"""
from enum import Enum


class TimeSlotVerdict(Enum):
    """Outcome of checking a proposed reservation start time."""
    VALID = ("VALID", "")
    MISSING = ("RESERVATION_TIME_MISSING", "Please choose a reservation time.")
    INVALID_FORMAT = ("RESERVATION_TIME_INVALID", "The reservation time is not valid.")
    IN_PAST = ("RESERVATION_TIME_IN_PAST", "Cannot choose a time in the past.")
    TOO_FAR_AHEAD = ("RESERVATION_TOO_FAR_AHEAD", "Bookings are accepted at most 3 days ahead.")
    BEFORE_OPENING = ("RESERVATION_BEFORE_OPENING", "The restaurant opens at 08:00.")
    AFTER_LAST_BOOKING = (
        "RESERVATION_AFTER_LAST_BOOKING",
        "Last booking is accepted at 21:00 (closing at 23:00).",
    )

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message

    @property
    def is_valid(self) -> bool:
        return self is TimeSlotVerdict.VALID
