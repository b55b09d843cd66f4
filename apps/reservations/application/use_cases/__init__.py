# Use cases
from .submit_reservation import SubmitReservationUseCase, validator_from_settings

__all__ = ['SubmitReservationUseCase', 'validator_from_settings']
