from __future__ import annotations
import threading
import time
from typing import Optional

from .exceptions import ApiCancelledError


class Deadline:
    """Cancellation token with an optional monotonic expiry.

    One instance may be shared by several calls; ``cancel()`` aborts all of
    them at their next checkpoint (before a request, or while backing off).
    """

    def __init__(self, timeout: Optional[float] = None):
        self._expires_at = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = threading.Event()

    @classmethod
    def never(cls) -> 'Deadline':
        return cls(None)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def remaining(self) -> Optional[float]:
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - time.monotonic())

    def check(self, operation: Optional[str] = None) -> None:
        if self.cancelled:
            raise ApiCancelledError('call cancelled', operation=operation)
        if self.expired:
            raise ApiCancelledError('deadline exceeded', operation=operation)

    def sleep(self, seconds: float) -> bool:
        """Wait up to ``seconds``; return False if the deadline ran out first."""
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            self._cancelled.wait(remaining)
            return False
        self._cancelled.wait(seconds)
        return not self.expired
