# Domain entities
from .cart import Cart
from .cart_line import ResolvedCartLine
from .promotion import Promotion

__all__ = ['Cart', 'ResolvedCartLine', 'Promotion']
