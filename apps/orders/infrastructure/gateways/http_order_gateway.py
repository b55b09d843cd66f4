"""
HTTP implementation of OrderGateway.
"""
import logging

from shared.domain.exceptions import AuthenticationExpiredError, ExternalServiceError
from shared.infrastructure.http import ApiClient
from ...domain.exceptions import OrderSubmissionError
from ...domain.repositories.order_gateway import OrderGateway

logger = logging.getLogger(__name__)


class HttpOrderGateway(OrderGateway):
    """POSTs orders to `/orders`."""

    def __init__(self, client: ApiClient):
        self.client = client

    def submit(self, payload: dict) -> dict:
        try:
            return self.client.post("/orders", payload) or {}
        except AuthenticationExpiredError:
            raise
        except ExternalServiceError as e:
            raise OrderSubmissionError(message=e.message, status_code=e.status_code) from e
