# Value objects
from .time_slot_verdict import TimeSlotVerdict

__all__ = ['TimeSlotVerdict']
