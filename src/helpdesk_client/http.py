"""
HTTP client for the helpdesk REST API.

This module provides the blocking HTTP client built on httpx that the
resource collections dispatch through:
- HTTP basic authentication (password or API token)
- Endpoint resolution (``users/1`` -> ``{base_url}/users/1.json``)
- JSON encoding of request bodies and decoding of responses
- Conversion of error responses into client exceptions
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
import logging

import httpx
from pydantic import BaseModel

from helpdesk_client.exceptions import (
    HelpdeskClientError,
    NetworkError,
    ConnectionError as ClientConnectionError,
    TimeoutError as ClientTimeoutError,
    RateLimitError,
    ServiceUnavailableError,
    ValidationError,
    exception_from_response,
)

logger = logging.getLogger(__name__)


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    def get_auth(self) -> Optional[httpx.Auth]:
        """Get the httpx auth object to attach to requests."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if credentials are available."""
        ...


class BasicAuthProvider(AuthProvider):
    """Email and password authentication."""

    def __init__(
        self,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self._email = email
        self._password = password

    def get_auth(self) -> Optional[httpx.Auth]:
        if not self.is_authenticated():
            return None
        return httpx.BasicAuth(self._email, self._password)

    def is_authenticated(self) -> bool:
        return bool(self._email) and self._password is not None


class TokenAuthProvider(AuthProvider):
    """
    API token authentication.

    The helpdesk expects the token as the basic-auth password with the
    username ``{email}/token``.
    """

    def __init__(
        self,
        email: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self._email = email
        self._token = token

    def get_auth(self) -> Optional[httpx.Auth]:
        if not self.is_authenticated():
            return None
        return httpx.BasicAuth(f"{self._email}/token", self._token)

    def is_authenticated(self) -> bool:
        return bool(self._email) and self._token is not None


class HTTPClient:
    """
    Blocking HTTP client for helpdesk API requests.

    This client handles:
    - Base URL management and ``.json`` endpoint resolution
    - Authentication
    - Response parsing and error handling

    It never retries; every call issues exactly one request.
    """

    def __init__(
        self,
        base_url: str,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        format: str = "json",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Account URL (e.g., "https://example.zendesk.com")
            auth_provider: Authentication provider
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            format: Response format suffix appended to every path
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or BasicAuthProvider()
        self.timeout = timeout
        self.format = format
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HTTPClient":
        self._get_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def resolve(self, path: str) -> str:
        """Turn a resource path into the request URL path."""
        path = path.strip("/")
        if not path:
            raise ValueError("Request path must not be empty")
        if self.format and not path.endswith(f".{self.format}"):
            path = f"{path}.{self.format}"
        return f"/{path}"

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code

        # The helpdesk reports errors as {"error": ..., "description": ..., "details": {...}}
        try:
            error_data = response.json()
            if isinstance(error_data, dict):
                error = error_data.get("error")
                # 403s arrive as {"error": {"title": ..., "message": ...}}
                if isinstance(error, dict):
                    error_code = error.get("title") if isinstance(error.get("title"), str) else None
                    error = error.get("message") or error.get("title")
                else:
                    error_code = error if isinstance(error, str) else None
                detail = (
                    error_data.get("description")
                    or error_data.get("detail")
                    or error_data.get("message")
                    or error
                    or error_data
                )
                details = error_data.get("details") if isinstance(error_data.get("details"), dict) else None
            else:
                detail = str(error_data)
                error_code = None
                details = None
        except ValueError:
            detail = response.text or f"HTTP {status_code}"
            error_code = None
            details = None

        detail = str(detail)
        logger.warning(f"{response.request.method} {response.request.url} failed with HTTP {status_code}: {detail}")

        if status_code in (400, 422):
            raise ValidationError(
                detail,
                status_code=status_code,
                error_code=error_code,
                field_errors=details,
            )
        if status_code in (429, 503):
            retry_after = response.headers.get("Retry-After")
            exception_class = RateLimitError if status_code == 429 else ServiceUnavailableError
            raise exception_class(
                detail,
                status_code=status_code,
                error_code=error_code,
                details=details,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        raise exception_from_response(status_code, detail, error_code=error_code, details=details)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path (resolved against base_url)
            params: Query parameters
            json_data: JSON body data (can be dict or Pydantic model)
            headers: Additional headers

        Returns:
            httpx.Response object

        Raises:
            HelpdeskClientError: On HTTP errors
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = self._get_client()
        url = self.resolve(path)
        request_headers = self._build_headers(headers)

        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", exclude_none=True)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"{method} {url} params={params}")

        try:
            response = client.request(
                method=method,
                url=url,
                params=params or None,
                json=json_data,
                headers=request_headers,
                auth=self.auth_provider.get_auth() or httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}")
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}")
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}")

        if not response.is_success:
            self._handle_error_response(response)

        return response

    @staticmethod
    def _parse(response: httpx.Response) -> Any:
        """Decode a JSON response body; empty bodies decode to None."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise HelpdeskClientError(
                f"Malformed JSON response: {e}",
                status_code=response.status_code,
            )

    # Dispatch methods used by resource collections

    def do_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path`` with ``params`` as the query string."""
        return self._parse(self._request("GET", path, params=params))

    def do_post(self, path: str, body: Optional[Union[Dict[str, Any], BaseModel]] = None) -> Any:
        """POST ``body`` as JSON to ``path``."""
        return self._parse(self._request("POST", path, json_data=body))

    def do_put(self, path: str, body: Optional[Union[Dict[str, Any], BaseModel]] = None) -> Any:
        """PUT ``body`` as JSON to ``path``."""
        return self._parse(self._request("PUT", path, json_data=body))

    def do_delete(self, path: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """DELETE ``path`` with ``options`` as the query string."""
        return self._parse(self._request("DELETE", path, params=options))
