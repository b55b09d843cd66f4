"""
Reservation submission serializers.
"""
from rest_framework import serializers


class ReservationDishSerializer(serializers.Serializer):
    """One pre-ordered dish in `cartItems`."""
    MaMon = serializers.IntegerField(min_value=0)
    SoLuong = serializers.IntegerField(min_value=1)
    GhiChu = serializers.CharField(allow_blank=True, default="")


class ReservationSubmissionSerializer(serializers.Serializer):
    """The body POSTed to `/public/dat-ban`. `cartItems` is left out when empty."""
    HoTen = serializers.CharField()
    SoDienThoai = serializers.CharField(max_length=20)
    Email = serializers.CharField(allow_blank=True)
    ThoiGianBatDau = serializers.CharField()
    SoNguoi = serializers.IntegerField(min_value=1, max_value=20)
    GhiChu = serializers.CharField(allow_blank=True, default="")
    cartItems = ReservationDishSerializer(many=True, required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not data.get('cartItems'):
            data.pop('cartItems', None)
        return data
