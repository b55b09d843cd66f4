"""
Order submission serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.payment_method import PaymentMethod


class OrderLineSerializer(serializers.Serializer):
    """One `ChiTietList` row."""
    MaMon = serializers.IntegerField(min_value=0)
    SoLuong = serializers.IntegerField(min_value=1)


class ShippingInfoSerializer(serializers.Serializer):
    """Serializer for shipping information."""
    DiaChi = serializers.CharField(allow_blank=True)
    SoDienThoai = serializers.CharField(allow_blank=True, max_length=20)


class OrderSubmissionSerializer(serializers.Serializer):
    """The order body POSTed to `/orders`, in the backend's field names."""
    MaKhachHang = serializers.IntegerField(required=False, allow_null=True)
    ChiTietList = OrderLineSerializer(many=True)
    shippingInfo = ShippingInfoSerializer()
    paymentMethod = serializers.ChoiceField(choices=[method.value for method in PaymentMethod])
    PromotionId = serializers.IntegerField(allow_null=True)
    DiscountAmount = serializers.DecimalField(max_digits=None, decimal_places=None, coerce_to_string=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        discount = data['DiscountAmount']
        data['DiscountAmount'] = int(discount) if discount == discount.to_integral_value() else float(discount)
        if data.get('MaKhachHang') is None:
            data.pop('MaKhachHang', None)
        return data
