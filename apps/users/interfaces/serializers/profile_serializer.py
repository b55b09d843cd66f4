"""
Customer profile serializer.
"""
from rest_framework import serializers

from shared.interfaces.serializers import AliasedSerializer
from ...domain.entities.customer_profile import CustomerProfile


class CustomerProfileSerializer(AliasedSerializer):
    """
    Reads the stored `user` record, whatever spelling the backend used.

    Unknown keys are ignored; every field is optional.
    """
    aliases = {
        'HoTen': ('hoTen', 'fullName'),
        'SDT': ('SoDienThoai', 'soDienThoai', 'phone'),
        'Email': ('email',),
        'DiaChi': ('diaChi', 'address'),
        'MaKhachHang': ('maKhachHang',),
    }

    HoTen = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    SDT = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    Email = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    DiaChi = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    MaKhachHang = serializers.IntegerField(required=False, allow_null=True, default=None)

    def to_entity(self) -> CustomerProfile:
        data = self.validated_data
        return CustomerProfile(
            full_name=(data.get('HoTen') or "").strip(),
            phone_number=(data.get('SDT') or "").strip(),
            email=(data.get('Email') or "").strip(),
            address=(data.get('DiaChi') or "").strip(),
            customer_id=data.get('MaKhachHang'),
            raw=dict(self.initial_data),
        )
