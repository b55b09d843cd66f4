# DTOs
from .auth_dto import AuthenticatedDTO, LoginDTO

__all__ = ['LoginDTO', 'AuthenticatedDTO']
