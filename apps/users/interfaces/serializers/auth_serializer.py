"""
Authentication serializers.
"""
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    """The body POSTed to `/users/login`."""
    TenDangNhap = serializers.CharField(max_length=255)
    MatKhau = serializers.CharField(max_length=255, trim_whitespace=False)


class LoginResultSerializer(serializers.Serializer):
    """The `{token, user}` record returned by a successful login."""
    token = serializers.CharField()
    user = serializers.DictField()
