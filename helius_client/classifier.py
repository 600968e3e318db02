from __future__ import annotations
from typing import Optional

from .exceptions import ApiAuthError, ApiError, ApiRateLimitError
from .status import (  # noqa: F401
    is_client_error,
    is_error,
    is_forbidden,
    is_not_found,
    is_rate_limited,
    is_server_error,
    is_unauthorized,
)
from .transport import RawResponse


def error_for_status(status_code: int, message: str, path: str, operation: Optional[str] = None) -> ApiError:
    if is_unauthorized(status_code) or is_forbidden(status_code):
        return ApiAuthError(status_code, message, path, operation=operation)
    if is_rate_limited(status_code):
        return ApiRateLimitError(status_code, message, path, operation=operation)
    return ApiError(status_code, message, path, operation=operation)


def classify(raw: RawResponse, path: str, operation: Optional[str] = None) -> bytes:
    """Return the body of a successful response, raise ApiError otherwise."""
    if is_error(raw.status_code):
        raise error_for_status(raw.status_code, raw.text, path, operation)
    return raw.body
