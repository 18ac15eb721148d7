"""
Main helpdesk API client.

This module provides the HelpdeskClient class, the primary entry point
for talking to a helpdesk account. It owns the HTTP client, picks the
authentication scheme and exposes the resource accessors.
"""

from typing import Any, Dict, Optional
import logging

from helpdesk_client.config import ClientSettings
from helpdesk_client.http import (
    AuthProvider,
    BasicAuthProvider,
    HTTPClient,
    TokenAuthProvider,
)
from helpdesk_client.resources.users import UsersMixin

logger = logging.getLogger(__name__)


class HelpdeskClient(UsersMixin):
    """
    Main client for the helpdesk API.

    Example usage:
        ```python
        with HelpdeskClient("https://example.zendesk.com",
                            email="agent@example.com",
                            token="abc123") as client:
            me = client.users().me().fetch()
            for user in client.users("Bob"):
                print(user["name"])

            client.users().create({"name": "Mr. Miyagi"})
            client.users(123).delete()
        ```

    Or without context manager:
        ```python
        client = HelpdeskClient.from_settings(ClientSettings.from_env())
        # ... use client ...
        client.close()
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        email: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        format: str = "json",
        http_client: Optional[HTTPClient] = None,
    ):
        """
        Initialize the helpdesk client.

        Args:
            base_url: Account URL (e.g., "https://example.zendesk.com")
            email: Agent email used for authentication
            password: Agent password (ignored when token is given)
            token: API token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            format: Response format suffix for every endpoint
            http_client: Pre-built HTTP client to dispatch through; when
                given, its own auth, timeout, headers and format are used
                and the other connection arguments are ignored
        """
        self._base_url = base_url.rstrip("/")

        if http_client is not None:
            self._http = http_client
            return

        auth_provider: AuthProvider
        if token is not None:
            auth_provider = TokenAuthProvider(email=email, token=token)
        else:
            auth_provider = BasicAuthProvider(email=email, password=password)

        self._http = HTTPClient(
            base_url=self._base_url,
            auth_provider=auth_provider,
            timeout=timeout,
            headers=headers,
            format=format,
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "HelpdeskClient":
        """Create a client from a ClientSettings instance."""
        return cls(
            settings.base_url,
            email=settings.email,
            password=settings.password,
            token=settings.token,
            timeout=settings.timeout,
            headers=settings.headers,
            format=settings.format,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Check if the client has credentials."""
        return self._http.auth_provider.is_authenticated()

    @property
    def http(self) -> HTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Dispatch
    # =========================================================================

    def do_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.do_get(path, params)

    def do_post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.do_post(path, body)

    def do_put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.do_put(path, body)

    def do_delete(self, path: str, options: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.do_delete(path, options)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.debug("Client closed")

    def __enter__(self) -> "HelpdeskClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"HelpdeskClient(base_url={self._base_url!r}, {auth_status})"
