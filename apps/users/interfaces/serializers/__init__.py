from .auth_serializer import LoginResultSerializer, LoginSerializer
from .profile_serializer import CustomerProfileSerializer

__all__ = ['LoginSerializer', 'LoginResultSerializer', 'CustomerProfileSerializer']
