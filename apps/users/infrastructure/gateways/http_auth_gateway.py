"""
HTTP implementation of AuthGateway.
"""
from shared.domain.exceptions import ExternalServiceError
from shared.infrastructure.http import ApiClient
from ...domain.exceptions import InvalidCredentialsError
from ...domain.repositories.auth_gateway import AuthGateway
from ...interfaces.serializers.auth_serializer import LoginSerializer


class HttpAuthGateway(AuthGateway):
    """POSTs credentials to `/users/login`."""

    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, username: str, password: str) -> dict:
        payload = LoginSerializer({'TenDangNhap': username, 'MatKhau': password}).data
        try:
            return self.client.post("/users/login", payload) or {}
        except ExternalServiceError as e:
            if e.status_code in (400, 401, 403, 404):
                raise InvalidCredentialsError(e.message) from e
            raise
