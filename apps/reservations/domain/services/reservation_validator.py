"""
Reservation time-slot rules.
"""
from datetime import datetime, time
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..exceptions import ReservationTimeRejectedError
from ..value_objects.time_slot_verdict import TimeSlotVerdict

StartTime = Union[datetime, str, None]

WALL_CLOCK_FORMAT = "%Y-%m-%dT%H:%M"


def parse_start_time(value: StartTime) -> Optional[datetime]:
    """
    Read a proposed start time as naive wall-clock time, minute precision.

    Strings look like `2026-10-20T18:30` (seconds allowed). A UTC offset, if
    present, is dropped without converting the clock fields. Returns None
    when the value cannot be read; a bare date has no time and is unreadable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif not isinstance(value, str):
        return None
    else:
        text = value.strip()
        if len(text) <= len("YYYY-MM-DD"):
            return None
        try:
            parsed = date_parser.isoparse(text)
        except (ValueError, OverflowError):
            return None
    return parsed.replace(tzinfo=None, second=0, microsecond=0)


def format_start_time(start: datetime) -> str:
    """The naive `YYYY-MM-DDTHH:MM` string the backend expects."""
    return start.strftime(WALL_CLOCK_FORMAT)


class ReservationTimeValidator:
    """
    Checks a proposed start time against booking rules, in a fixed order:
    presence, not in the past, not too far ahead, after opening, and no
    later than the last booking slot. The first failing rule is reported.
    """

    def __init__(self, opening_hour: int = 8, last_booking_hour: int = 21, max_days_ahead: int = 3):
        self.opening_hour = opening_hour
        self.last_booking = time(hour=last_booking_hour)
        self.max_days_ahead = max_days_ahead

    def check(self, start: StartTime, now: datetime) -> TimeSlotVerdict:
        if start is None or (isinstance(start, str) and not start.strip()):
            return TimeSlotVerdict.MISSING

        proposed = parse_start_time(start)
        if proposed is None:
            return TimeSlotVerdict.INVALID_FORMAT

        now = now.replace(tzinfo=None)
        if proposed < now:
            return TimeSlotVerdict.IN_PAST
        if proposed > now + relativedelta(days=self.max_days_ahead):
            return TimeSlotVerdict.TOO_FAR_AHEAD
        if proposed.hour < self.opening_hour:
            return TimeSlotVerdict.BEFORE_OPENING
        if proposed.time() > self.last_booking:
            return TimeSlotVerdict.AFTER_LAST_BOOKING
        return TimeSlotVerdict.VALID

    def require_valid(self, start: StartTime, now: datetime) -> datetime:
        """Return the parsed start time or raise ReservationTimeRejectedError."""
        verdict = self.check(start, now)
        if not verdict.is_valid:
            raise ReservationTimeRejectedError(verdict)
        return parse_start_time(start)
