"""Status-code predicates shared by the classifier and ApiError."""
from __future__ import annotations

NOT_FOUND = 404
TOO_MANY_REQUESTS = 429
UNAUTHORIZED = 401
FORBIDDEN = 403


def is_not_found(status_code: int) -> bool:
    return status_code == NOT_FOUND


def is_rate_limited(status_code: int) -> bool:
    return status_code == TOO_MANY_REQUESTS


def is_unauthorized(status_code: int) -> bool:
    return status_code == UNAUTHORIZED


def is_forbidden(status_code: int) -> bool:
    return status_code == FORBIDDEN


def is_client_error(status_code: int) -> bool:
    return 400 <= status_code <= 499


def is_server_error(status_code: int) -> bool:
    return 500 <= status_code <= 599


def is_error(status_code: int) -> bool:
    return status_code >= 400
