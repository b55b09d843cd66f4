from .cache_credential_store import CacheCredentialStore

__all__ = ['CacheCredentialStore']
