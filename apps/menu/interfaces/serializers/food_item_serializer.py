"""
Food item serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from shared.interfaces import AliasedSerializer
from ...domain.entities.food_item import FoodItem
from ...domain.value_objects.money import Money


class FoodItemSerializer(AliasedSerializer):
    """
    Validates one `/menu` row and turns it into a FoodItem.

    Accepts both `MaMon` and `maMon` style keys; the category label is read
    from the nested `loaiMon` object.
    """
    aliases = {
        'MaMon': ('maMon',),
        'TenMon': ('tenMon',),
        'Gia': ('gia',),
        'HinhAnh': ('hinhAnh',),
        'loaiMon': ('LoaiMon',),
    }

    MaMon = serializers.IntegerField(min_value=0)
    TenMon = serializers.CharField(max_length=255)
    Gia = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=Decimal('0'))
    HinhAnh = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    loaiMon = serializers.DictField(required=False, allow_null=True, default=None)

    def to_entity(self) -> FoodItem:
        data = self.validated_data
        category = data.get('loaiMon') or {}
        return FoodItem(
            id=data['MaMon'],
            name=data['TenMon'],
            price=Money(amount=data['Gia']),
            category=category.get('TenLoai') or category.get('tenLoai') or "",
            image=data.get('HinhAnh') or "",
        )


class FoodItemOutputSerializer(serializers.Serializer):
    """Serializer for a FoodItem in the backend's field names."""

    def to_representation(self, instance: FoodItem) -> dict:
        return {
            'MaMon': instance.id,
            'TenMon': instance.name,
            'Gia': str(instance.price.amount),
            'HinhAnh': instance.image,
            'loaiMon': {'TenLoai': instance.category} if instance.category else None,
        }
