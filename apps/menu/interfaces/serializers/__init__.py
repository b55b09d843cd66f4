# Serializers
from .food_item_serializer import FoodItemOutputSerializer, FoodItemSerializer

__all__ = ['FoodItemSerializer', 'FoodItemOutputSerializer']
