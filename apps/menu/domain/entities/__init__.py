# Domain entities
from .catalog import Catalog
from .food_item import FoodItem

__all__ = ['Catalog', 'FoodItem']
