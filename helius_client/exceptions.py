from __future__ import annotations
from typing import Optional

from . import status


class ApiRequestError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, *, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class ApiEncodingError(ApiRequestError):
    """Request payload could not be serialized to JSON."""


class ApiDecodeError(ApiRequestError):
    """Successful response body did not match the expected schema."""


class ApiTransportError(ApiRequestError):
    """Connection or timeout failure that outlasted the retry budget."""

    def __init__(self, message: str, *, operation: Optional[str] = None, attempts: int = 1):
        super().__init__(message, operation=operation)
        self.attempts = attempts


class ApiCancelledError(ApiRequestError):
    """The caller's deadline expired or was cancelled before the call finished."""


class ApiError(ApiRequestError):
    """Error reported for a status >= 400.

    The raw response body is kept verbatim in ``message``; upstream error
    bodies are not guaranteed to be JSON.
    """

    client_side = False

    def __init__(self, status_code: int, message: str, path: str, *, operation: Optional[str] = None):
        super().__init__(f"helius api error: {path} returned status {status_code}: {message}", operation=operation)
        self.status_code = status_code
        self.message = message
        self.path = path

    def is_not_found(self) -> bool:
        return status.is_not_found(self.status_code)

    def is_rate_limited(self) -> bool:
        return status.is_rate_limited(self.status_code)

    def is_unauthorized(self) -> bool:
        return status.is_unauthorized(self.status_code)

    def is_forbidden(self) -> bool:
        return status.is_forbidden(self.status_code)

    def is_client_error(self) -> bool:
        return status.is_client_error(self.status_code)

    def is_server_error(self) -> bool:
        return status.is_server_error(self.status_code)


class ApiValidationError(ApiError):
    """Pre-flight rejection raised before any network call is made."""

    client_side = True

    def __init__(self, message: str, path: str, *, operation: Optional[str] = None):
        super().__init__(400, message, path, operation=operation)


class ApiAuthError(ApiError):
    """Authentication or authorization failure (401/403)."""


class ApiRateLimitError(ApiError):
    """Rate limiting encountered (429)."""


def as_api_error(exc: Optional[BaseException]) -> Optional[ApiError]:
    """Return the first ApiError found along the exception's cause chain."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, ApiError):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__ or exc.__context__
    return None
