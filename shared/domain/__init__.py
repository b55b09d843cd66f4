# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject, to_decimal
from .domain_event import DomainEvent
from .exceptions import (
    GENERIC_ERROR_MESSAGE,
    AuthenticationExpiredError,
    DomainException,
    EntityNotFoundError,
    ExternalServiceError,
    InvalidOperationError,
    SubmissionInProgressError,
    ValidationError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'to_decimal',
    'DomainEvent',
    'GENERIC_ERROR_MESSAGE',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'InvalidOperationError',
    'SubmissionInProgressError',
    'ExternalServiceError',
    'AuthenticationExpiredError',
]
