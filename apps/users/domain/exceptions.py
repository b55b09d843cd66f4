"""
User domain exceptions.
"""
from shared.domain.exceptions import DomainException, ExternalServiceError


class InvalidCredentialsError(ExternalServiceError):
    """Raised when the backend refuses a username and password."""

    def __init__(self, message: str = None):
        super().__init__(
            message=message or "Invalid username or password.",
            code="INVALID_CREDENTIALS",
            status_code=400,
        )


class InvalidProfileDataError(DomainException):
    """Raised when a stored or returned customer profile cannot be read."""

    def __init__(self, detail: str):
        super().__init__(
            message=f"Invalid customer profile: {detail}",
            code="INVALID_PROFILE_DATA"
        )
        self.detail = detail
