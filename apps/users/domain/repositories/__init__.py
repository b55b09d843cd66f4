# Repository interfaces
from .auth_gateway import AuthGateway
from .credential_store import CredentialStore

__all__ = ['AuthGateway', 'CredentialStore']
