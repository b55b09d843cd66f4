# Shared interfaces module
from .exception_handlers import error_payload
from .serializers import AliasedSerializer

__all__ = ['error_payload', 'AliasedSerializer']
