from .json_cache import JsonCache

__all__ = ['JsonCache']
