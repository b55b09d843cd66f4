# Domain entities
from .customer_profile import CustomerProfile

__all__ = ['CustomerProfile']
