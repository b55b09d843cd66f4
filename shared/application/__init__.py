# Shared application module
from .base_use_case import SingleFlightMixin, UseCase, UseCaseResult

__all__ = ['UseCase', 'UseCaseResult', 'SingleFlightMixin']
