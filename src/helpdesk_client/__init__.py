"""
Helpdesk Client Library.

A fluent HTTP client for the users resource of a helpdesk REST API.

Example usage:
    ```python
    from helpdesk_client import HelpdeskClient

    with HelpdeskClient("https://example.zendesk.com",
                        email="agent@example.com",
                        token="abc123") as client:
        # List and search
        users = list(client.users())
        bobs = list(client.users("Bob", {"role": "end-user"}))

        # Single records
        user = client.users(123).fetch()
        identities = client.users(123).identities().fetch()

        # Write
        client.users().create({"name": "Mr. Miyagi"})
        client.users(123).update({"email": "hongkong@phooey.com"})
        client.users(123).delete()
    ```
"""

__version__ = "0.1.0"

# Main client
from helpdesk_client.client import HelpdeskClient
from helpdesk_client.config import ClientSettings

# HTTP client components (for advanced usage)
from helpdesk_client.http import (
    HTTPClient,
    AuthProvider,
    BasicAuthProvider,
    TokenAuthProvider,
)

# Request builders
from helpdesk_client.collection import Collection
from helpdesk_client.resources.users import UsersCollection, UsersMixin
from helpdesk_client.selectors import (
    AllSelector,
    IdSelector,
    QuerySelector,
    parse_selector,
)

# Exceptions
from helpdesk_client.exceptions import (
    HelpdeskClientError,
    InvalidSelectorError,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "HelpdeskClient",
    "ClientSettings",
    # HTTP components
    "HTTPClient",
    "AuthProvider",
    "BasicAuthProvider",
    "TokenAuthProvider",
    # Request builders
    "Collection",
    "UsersCollection",
    "UsersMixin",
    "AllSelector",
    "IdSelector",
    "QuerySelector",
    "parse_selector",
    # Exceptions
    "HelpdeskClientError",
    "InvalidSelectorError",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "exception_from_response",
]
