from .api_client import ApiClient

__all__ = ['ApiClient']
