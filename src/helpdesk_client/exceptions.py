"""
Exception hierarchy for the helpdesk client library.

Every error raised by the HTTP layer maps to one of these classes. Each
exception keeps the HTTP status code, the error code reported by the
server and any additional details from the response body. Subclasses
only declare their default message and status code.
"""

from typing import Any, Dict, Optional


class HelpdeskClientError(Exception):
    """
    Base exception for all helpdesk client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Error identifier reported by the server (e.g., "RecordInvalid")
        details: Additional error details from the response
    """

    default_message: str = "Helpdesk request failed"
    default_status_code: Optional[int] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


class InvalidSelectorError(HelpdeskClientError, TypeError):
    """A resource accessor was called with an argument it cannot route."""

    def __init__(self, selector: Any, *, message: Optional[str] = None):
        super().__init__(
            message or f"Unsupported selector {selector!r} of type {type(selector).__name__}",
            details={"selector_type": type(selector).__name__},
        )
        self.selector = selector


class RetryAfterMixin:
    """Carries the ``Retry-After`` seconds the server asked callers to wait."""

    def __init__(self, message: Optional[str] = None, *, retry_after: Optional[int] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


# =============================================================================
# Client errors (4xx)
# =============================================================================


class AuthenticationError(HelpdeskClientError):
    """Missing or wrong email/password, or a revoked API token."""

    default_message = "Authentication required"
    default_status_code = 401


class AuthorizationError(HelpdeskClientError):
    """The authenticated agent is not allowed to perform the operation."""

    default_message = "Access denied"
    default_status_code = 403


class ValidationError(HelpdeskClientError):
    """
    Request validation failed.

    The helpdesk answers 422 with a per-field ``details`` mapping when a
    record cannot be saved; those are exposed as ``field_errors``.
    """

    default_message = "Validation error"
    default_status_code = 422

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        field_errors: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ):
        if field_errors:
            details = details or {}
            details["field_errors"] = field_errors
        super().__init__(message, details=details, **kwargs)
        self.field_errors = field_errors or {}


class NotFoundError(HelpdeskClientError):
    default_message = "Resource not found"
    default_status_code = 404


class ConflictError(HelpdeskClientError):
    default_message = "Resource conflict"
    default_status_code = 409


class RateLimitError(RetryAfterMixin, HelpdeskClientError):
    """Rate limit exceeded. The client never waits or retries on its own."""

    default_message = "Rate limit exceeded"
    default_status_code = 429


# =============================================================================
# Server errors (5xx)
# =============================================================================


class ServerError(HelpdeskClientError):
    default_message = "Server error"
    default_status_code = 500


class ServiceUnavailableError(RetryAfterMixin, ServerError):
    """The service is temporarily unavailable (maintenance, overload)."""

    default_message = "Service temporarily unavailable"
    default_status_code = 503


# =============================================================================
# Network errors (client-side, no status code)
# =============================================================================


class NetworkError(HelpdeskClientError):
    """Connection problem, DNS failure or other transport failure reported by httpx."""

    default_message = "Network error"


class TimeoutError(NetworkError):
    default_message = "Request timed out"


class ConnectionError(NetworkError):
    default_message = "Failed to connect to server"


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> HelpdeskClientError:
    """
    Create an appropriate exception from an HTTP response.

    Unmapped 5xx codes become ServerError, anything else the base class.
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else HelpdeskClientError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
