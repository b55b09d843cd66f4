"""
Django cache wrapper with JSON serialization.
"""
import json
from typing import Any, Optional

from django.core.cache import cache


class JsonCache:
    """Prefixed view over the Django cache that stores dicts and lists as JSON."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def _make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        """Get a value from cache."""
        value = cache.get(self._make_key(key))
        if value is not None and isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value

    def set(self, key: str, value: Any, timeout: Optional[int] = 300) -> None:
        """Set a value in cache. A timeout of None keeps it until deleted."""
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False)
        cache.set(self._make_key(key), value, timeout)

    def get_raw(self, key: str) -> Optional[str]:
        """Get a stored string exactly as it was written."""
        return cache.get(self._make_key(key))

    def delete(self, key: str) -> None:
        """Delete a value from cache."""
        cache.delete(self._make_key(key))
