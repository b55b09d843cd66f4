# Domain services
from .reservation_validator import (
    ReservationTimeValidator,
    format_start_time,
    parse_start_time,
)

__all__ = ['ReservationTimeValidator', 'format_start_time', 'parse_start_time']
