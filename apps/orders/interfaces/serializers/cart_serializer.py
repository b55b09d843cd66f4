"""
Cart serializers.
"""
from rest_framework import serializers


class MoneyField(serializers.Field):
    """Renders Money as a whole-dong integer."""

    def to_representation(self, value):
        return int(value.rounded().amount)


class CartLineSerializer(serializers.Serializer):
    """Serializer for a resolved cart line."""
    item_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    image = serializers.CharField(source='item.image', read_only=True)
    unit_price = MoneyField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    line_total = MoneyField(read_only=True)


class CartSummarySerializer(serializers.Serializer):
    """Serializer for a PricingResult, as the checkout screen shows it."""
    items = CartLineSerializer(source='lines', many=True, read_only=True)
    subtotal = MoneyField(read_only=True)
    discount = MoneyField(read_only=True)
    shipping = MoneyField(read_only=True)
    total = MoneyField(source='display_total', read_only=True)
    formatted_total = serializers.CharField(source='display_total.formatted', read_only=True)
    promotion_name = serializers.CharField(source='promotion.name', read_only=True, default=None)
    promotion_label = serializers.CharField(source='promotion.label', read_only=True, default=None)
