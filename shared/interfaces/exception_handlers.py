"""
Map exceptions to user-facing error payloads.
"""
import logging

from shared.domain.exceptions import (
    GENERIC_ERROR_MESSAGE,
    DomainException,
    EntityNotFoundError,
    ExternalServiceError,
    InvalidOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_payload(exc: Exception) -> dict:
    """
    Build the `{error, code, ...}` payload shown to the customer.

    Validation failures keep their own message so each rule reads differently.
    Anything that is not a domain exception collapses to the generic message.
    """
    if isinstance(exc, EntityNotFoundError):
        return {
            'error': exc.message,
            'code': exc.code,
            'entity': exc.entity_name,
            'entity_id': exc.entity_id,
        }

    if isinstance(exc, ValidationError):
        return {
            'error': exc.message,
            'code': exc.code,
            'field': exc.field,
        }

    if isinstance(exc, InvalidOperationError):
        return {
            'error': exc.message,
            'code': exc.code,
            'operation': exc.operation,
            'state': exc.state,
        }

    if isinstance(exc, ExternalServiceError):
        return {
            'error': exc.message,
            'code': exc.code,
            'status': exc.status_code,
        }

    if isinstance(exc, DomainException):
        return {
            'error': exc.message,
            'code': exc.code,
        }

    logger.error(f"Unhandled error: {exc}", exc_info=exc)
    return {
        'error': GENERIC_ERROR_MESSAGE,
        'code': 'INTERNAL_ERROR',
    }
