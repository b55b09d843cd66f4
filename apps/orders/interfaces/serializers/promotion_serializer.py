"""
Promotion serializers.
"""
from datetime import date
from decimal import Decimal

from dateutil import parser as date_parser
from rest_framework import serializers

from shared.interfaces import AliasedSerializer
from ...domain.entities.promotion import Promotion
from ...domain.value_objects.discount_kind import DiscountKind


class PromotionSerializer(AliasedSerializer):
    """
    Validates one `/promotions` row and turns it into a Promotion.

    Older rows carry camelCase keys; the redemption code lives in `MaApDung`.
    """
    aliases = {
        'MaKM': ('maKM', 'id'),
        'TenKM': ('tenKM',),
        'LoaiGiamGia': ('loaiGiamGia',),
        'GiaTriGiam': ('giaTriGiam',),
        'NgayBatDau': ('ngayBatDau',),
        'NgayKetThuc': ('ngayKetThuc',),
        'MaApDung': ('maApDung', 'code'),
    }

    MaKM = serializers.IntegerField()
    TenKM = serializers.CharField(max_length=100)
    LoaiGiamGia = serializers.CharField(max_length=20)
    GiaTriGiam = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=Decimal('0'))
    NgayBatDau = serializers.CharField()
    NgayKetThuc = serializers.CharField()
    MaApDung = serializers.CharField(max_length=50, required=False, allow_null=True, allow_blank=True)

    def validate_NgayBatDau(self, value: str) -> date:
        return self._parse_day(value)

    def validate_NgayKetThuc(self, value: str) -> date:
        return self._parse_day(value)

    def validate(self, attrs):
        if attrs['NgayKetThuc'] < attrs['NgayBatDau']:
            raise serializers.ValidationError("NgayKetThuc must not be before NgayBatDau")
        kind = DiscountKind.from_code(attrs['LoaiGiamGia'])
        if kind is DiscountKind.PERCENTAGE and attrs['GiaTriGiam'] > 100:
            raise serializers.ValidationError("A percentage discount cannot exceed 100")
        attrs['LoaiGiamGia'] = kind
        return attrs

    @staticmethod
    def _parse_day(value: str) -> date:
        # Only the calendar day matters; any time or offset is dropped as-is.
        try:
            return date_parser.isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            raise serializers.ValidationError(f"'{value}' is not an ISO date")

    def to_entity(self) -> Promotion:
        data = self.validated_data
        return Promotion(
            id=data['MaKM'],
            name=data['TenKM'],
            kind=data['LoaiGiamGia'],
            value=data['GiaTriGiam'],
            start_date=data['NgayBatDau'],
            end_date=data['NgayKetThuc'],
            code=(data.get('MaApDung') or "").strip() or None,
        )
