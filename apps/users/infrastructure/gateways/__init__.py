from .http_auth_gateway import HttpAuthGateway

__all__ = ['HttpAuthGateway']
