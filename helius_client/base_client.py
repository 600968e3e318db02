from __future__ import annotations
from typing import Any, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .classifier import classify
from .config import ClientConfig
from .deadline import Deadline
from .exceptions import ApiDecodeError, ApiError, ApiValidationError
from .log import default_logger
from .request_builder import build_request, with_api_key
from .transport import RequestsTransport, RetryingTransport, RetryPolicy

T = TypeVar('T')


class BaseClient:
    """Request execution core: build, send with retries, classify, decode."""

    def __init__(self, api_key: str = '', *, config: Optional[ClientConfig] = None, **options: Any):
        if config is None:
            config = ClientConfig(api_key=api_key, **options)
        elif api_key or options:
            raise TypeError('pass either a config or api_key/options, not both')
        self.config = config
        self.logger = config.logger or default_logger()
        policy = RetryPolicy(
            max_retries=config.max_retries,
            wait_min=config.retry_wait_min,
            wait_max=config.retry_wait_max,
            extra_statuses=config.retry_statuses,
        )
        self._transport = RetryingTransport(config.transport or RequestsTransport(), policy, config.timeout, log=self.logger)

    @classmethod
    def from_config(cls, config: ClientConfig):
        return cls(config=config)

    @classmethod
    def from_env(cls, **overrides: Any):
        return cls(config=ClientConfig.from_env(**overrides))

    @property
    def api_url(self) -> str:
        return self.config.resolved_api_url

    @property
    def rpc_url(self) -> str:
        """RPC connection string for an external Solana RPC client."""
        return with_api_key(self.config.resolved_rpc_url.rstrip('/') + '/', self.config.api_key)

    def _request(self, method: str, path: str, payload: Any = None, *, operation: str, deadline: Optional[Deadline] = None) -> bytes:
        request = build_request(self.api_url, path, self.config.api_key, method, payload, operation=operation)
        self.logger.debug('making request method=%s path=%s', request.method, path)
        raw = self._transport.send(request, deadline, operation)
        try:
            return classify(raw, path, operation)
        except ApiError as e:
            self.logger.error('api error status=%d path=%s attempts=%d body=%s', e.status_code, path, raw.attempts, e.message)
            raise

    def _get(self, path: str, **kw: Any) -> bytes:
        return self._request('GET', path, **kw)

    def _post(self, path: str, payload: Any, **kw: Any) -> bytes:
        return self._request('POST', path, payload, **kw)

    def _put(self, path: str, payload: Any, **kw: Any) -> bytes:
        return self._request('PUT', path, payload, **kw)

    def _delete(self, path: str, **kw: Any) -> bytes:
        return self._request('DELETE', path, **kw)

    @staticmethod
    def _decode(body: bytes, schema: Type[T], *, operation: str) -> T:
        try:
            return TypeAdapter(schema).validate_json(body)
        except ValidationError as e:
            raise ApiDecodeError(f"decode response: {e}", operation=operation) from e

    @staticmethod
    def _require(value: Any, message: str, path: str, operation: str) -> None:
        if not value:
            raise ApiValidationError(message, path, operation=operation)

    def close(self) -> None:
        transport = self._transport.transport
        if hasattr(transport, 'close'):
            transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
