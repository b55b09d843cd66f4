# Use cases
from .login_user import LoginUserUseCase

__all__ = ['LoginUserUseCase']
