# Domain entities
from .dish_selection import DishSelection, DishSelectionEntry
from .reservation_draft import ReservationDraft

__all__ = ['DishSelection', 'DishSelectionEntry', 'ReservationDraft']
