"""
Domain exceptions.
"""

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when user input fails a local validation rule."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state


class ExternalServiceError(DomainException):
    """
    Raised when the backend rejects a request or cannot be reached.

    The backend's own message is kept when it sent one; otherwise the
    generic message is used.
    """

    def __init__(self, message: str = None, code: str = "EXTERNAL_SERVICE_ERROR",
                 status_code: int = None):
        super().__init__(message=message or GENERIC_ERROR_MESSAGE, code=code)
        self.status_code = status_code


class AuthenticationExpiredError(ExternalServiceError):
    """Raised when the backend refuses the session credential."""

    def __init__(self, message: str = None):
        super().__init__(
            message=message or "Your session has expired. Please log in again.",
            code="AUTHENTICATION_EXPIRED",
            status_code=401,
        )


class SubmissionInProgressError(InvalidOperationError):
    """Raised when a form is submitted again before the first submission returns."""

    def __init__(self, operation: str = None):
        super().__init__(
            message="A submission is already in progress. Please wait.",
            operation=operation,
            state="busy",
        )
        self.code = "SUBMISSION_IN_PROGRESS"
