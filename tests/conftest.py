import json
import time
from typing import Any, List, Optional

import pytest
import requests

from helius_client import HeliusClient
from helius_client.log import NullLogger
from helius_client.request_builder import Request
from helius_client.transport import RawResponse


class StubTransport:
    """Replays scripted outcomes and records every request it sees.

    Each script entry is a RawResponse, an exception instance (raised), or a
    (latency_seconds, outcome) tuple that simulates a slow server. The last
    entry repeats once the script runs out.
    """

    def __init__(self, *outcomes: Any):
        self.outcomes = list(outcomes)
        self.requests: List[Request] = []
        self.timeouts: List[Optional[float]] = []

    def queue(self, *outcomes: Any) -> 'StubTransport':
        self.outcomes.extend(outcomes)
        return self

    def execute(self, request: Request, timeout: Optional[float]) -> RawResponse:
        self.requests.append(request)
        self.timeouts.append(timeout)
        if not self.outcomes:
            raise AssertionError(f'unexpected request: {request.method} {request.url}')
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, tuple):
            latency, outcome = outcome
            if timeout is not None and timeout < latency:
                time.sleep(timeout)
                raise requests.Timeout('read timed out')
            time.sleep(latency)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def calls(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].body)


def ok(payload: Any, status: int = 200) -> RawResponse:
    return RawResponse(status_code=status, body=json.dumps(payload).encode('utf-8'), headers={'Content-Type': 'application/json'})


def fail(status: int, text: str = 'error', headers: Optional[dict] = None) -> RawResponse:
    return RawResponse(status_code=status, body=text.encode('utf-8'), headers=headers or {})


@pytest.fixture
def stub():
    return StubTransport()


@pytest.fixture
def make_client(stub):
    def _make(**options: Any) -> HeliusClient:
        options.setdefault('transport', stub)
        options.setdefault('retry_wait_min', 0.0)
        options.setdefault('retry_wait_max', 0.0)
        options.setdefault('logger', NullLogger())
        return HeliusClient('test-api-key', **options)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
