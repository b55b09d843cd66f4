"""
Django cache implementation of CredentialStore.
"""
from typing import Optional, Tuple

from shared.infrastructure.cache import JsonCache
from ...domain.repositories.credential_store import CredentialStore


class CacheCredentialStore(CredentialStore):
    """Keeps the `token` and `user` slots in the Django cache, without expiry."""

    TOKEN_KEY = "token"
    USER_KEY = "user"

    def __init__(self, cache: Optional[JsonCache] = None):
        self.cache = cache or JsonCache(prefix="credentials")

    def load(self) -> Tuple[Optional[str], Optional[str]]:
        return self.cache.get_raw(self.TOKEN_KEY), self.cache.get_raw(self.USER_KEY)

    def save(self, token: str, user_json: str) -> None:
        self.cache.set(self.TOKEN_KEY, token, timeout=None)
        self.cache.set(self.USER_KEY, user_json, timeout=None)

    def clear(self) -> None:
        self.cache.delete(self.TOKEN_KEY)
        self.cache.delete(self.USER_KEY)
