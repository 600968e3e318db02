from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Optional, Protocol

import requests

from .deadline import Deadline
from .exceptions import ApiCancelledError, ApiTransportError
from .request_builder import Request, redact_url
from .status import is_rate_limited, is_server_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes = b''
    headers: Dict[str, str] = field(default_factory=dict)
    attempts: int = 1

    @property
    def text(self) -> str:
        return self.body.decode('utf-8', errors='replace')


class Transport(Protocol):
    """Single-attempt HTTP execution. Retries are layered on top."""

    def execute(self, request: Request, timeout: Optional[float]) -> RawResponse:
        ...


class RequestsTransport:
    """Transport backed by a pooled requests.Session (safe to share across threads)."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def execute(self, request: Request, timeout: Optional[float]) -> RawResponse:
        resp = self.session.request(request.method, request.url, data=request.body, headers=request.headers, timeout=timeout)
        return RawResponse(status_code=resp.status_code, body=resp.content, headers=dict(resp.headers))

    def close(self) -> None:
        self.session.close()


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    wait_min: float = 0.5
    wait_max: float = 5.0
    extra_statuses: FrozenSet[int] = frozenset()

    def should_retry(self, status_code: int) -> bool:
        return is_rate_limited(status_code) or is_server_error(status_code) or status_code in self.extra_statuses

    def backoff(self, attempt: int, response: Optional[RawResponse] = None) -> float:
        """Delay before retry number ``attempt`` (0-based)."""
        if response is not None and response.status_code in (429, 503):
            retry_after = _retry_after(response.headers)
            if retry_after is not None:
                return min(self.wait_max, retry_after)
        return min(self.wait_max, self.wait_min * (2 ** attempt))


def _retry_after(headers: Dict[str, str]) -> Optional[float]:
    for k, v in headers.items():
        if k.lower() == 'retry-after':
            try:
                return max(0.0, float(v))
            except (TypeError, ValueError):
                return None
    return None


class RetryingTransport:
    """Runs a Transport under a RetryPolicy, honouring the caller's Deadline."""

    def __init__(self, transport: Transport, policy: RetryPolicy, timeout: float, log: Any = None):
        self.transport = transport
        self.policy = policy
        self.timeout = timeout
        self.log = log or logger

    def _attempt_timeout(self, deadline: Deadline, operation: Optional[str]) -> float:
        remaining = deadline.remaining()
        if remaining is None:
            return self.timeout
        if remaining <= 0:
            raise ApiCancelledError('deadline exceeded', operation=operation)
        return min(self.timeout, remaining)

    def send(self, request: Request, deadline: Optional[Deadline] = None, operation: Optional[str] = None) -> RawResponse:
        deadline = deadline or Deadline.never()
        attempt = 0
        while True:
            deadline.check(operation)
            attempt += 1
            try:
                resp = self.transport.execute(request, timeout=self._attempt_timeout(deadline, operation))
            except (requests.ConnectionError, requests.Timeout) as e:
                if deadline.expired:
                    raise ApiCancelledError(f"deadline exceeded during {request.method} {request.path}", operation=operation) from e
                if attempt > self.policy.max_retries:
                    raise ApiTransportError(f"do request: {request.method} {request.path} failed after {attempt} attempt(s): {e}", operation=operation, attempts=attempt) from e
                wait = self.policy.backoff(attempt - 1)
                self.log.warning('request failed, retrying method=%s url=%s attempt=%d wait=%.2fs error=%s', request.method, redact_url(request.url), attempt, wait, e)
            except requests.RequestException as e:
                # Malformed URL or header; fails the same way on every attempt.
                raise ApiTransportError(f"do request: {request.method} {request.path}: {e}", operation=operation, attempts=attempt) from e
            else:
                if not self.policy.should_retry(resp.status_code) or attempt > self.policy.max_retries:
                    return replace(resp, attempts=attempt)
                wait = self.policy.backoff(attempt - 1, resp)
                self.log.warning('retryable status, retrying method=%s url=%s status=%d attempt=%d wait=%.2fs', request.method, redact_url(request.url), resp.status_code, attempt, wait)
            if not deadline.sleep(wait):
                raise ApiCancelledError(f"deadline exceeded while retrying {request.method} {request.path}", operation=operation)
