"""
HTTP client for the restaurant backend.
"""
import logging
from typing import Any, Callable, Optional

import requests
from django.conf import settings

from shared.domain.exceptions import AuthenticationExpiredError, ExternalServiceError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    requests.Session wrapper for the restaurant JSON API.

    Every response is shaped `{"success": bool, "message": str, "data": ...}`;
    `get`/`post` return the unwrapped `data`. A 401 runs the unauthorized
    callback (the session uses it to log out) and raises
    AuthenticationExpiredError. Any other failure raises ExternalServiceError
    with the backend's message when it sent one.
    """

    HEADERS = {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.RESTAURANT_API_BASE_URL).rstrip('/')
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self.timeout = timeout if timeout is not None else settings.RESTAURANT_API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(self.HEADERS)

    def get(self, path: str, params: dict = None) -> Any:
        return self._request('GET', path, params=params)

    def post(self, path: str, payload: dict) -> Any:
        return self._request('POST', path, json=payload)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _auth_headers(self) -> dict:
        token = self.token_provider() if self.token_provider else None
        if token:
            return {'Authorization': f"Bearer {token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        try:
            response = self.session.request(
                method,
                url,
                headers=self._auth_headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ExternalServiceError(code="NETWORK_ERROR") from e

        body = self._json_body(response)

        if response.status_code == 401:
            logger.warning(f"{method} {url} rejected the session credential")
            if self.on_unauthorized:
                self.on_unauthorized()
            raise AuthenticationExpiredError(body.get('message'))

        if not response.ok or body.get('success') is False:
            logger.warning(f"{method} {url} returned {response.status_code}: {body.get('message')}")
            raise ExternalServiceError(
                message=body.get('message'),
                status_code=response.status_code,
            )

        return body.get('data')

    @staticmethod
    def _json_body(response: requests.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {'data': body}
