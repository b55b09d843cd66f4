"""
HTTP implementation of ReservationGateway.
"""
from shared.domain.exceptions import AuthenticationExpiredError, ExternalServiceError
from shared.infrastructure.http import ApiClient
from ...domain.exceptions import ReservationSubmissionError
from ...domain.repositories.reservation_gateway import ReservationGateway


class HttpReservationGateway(ReservationGateway):
    """POSTs reservations to the public `/public/dat-ban` endpoint."""

    path = "/public/dat-ban"

    def __init__(self, client: ApiClient):
        self.client = client

    def submit(self, payload: dict) -> dict:
        try:
            return self.client.post(self.path, payload) or {}
        except AuthenticationExpiredError:
            raise
        except ExternalServiceError as e:
            raise ReservationSubmissionError(message=e.message, status_code=e.status_code) from e
