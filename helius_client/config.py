from __future__ import annotations
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, FrozenSet, Mapping, Optional

from .exceptions import ApiValidationError


class Network(str, Enum):
    MAINNET = 'mainnet'
    DEVNET = 'devnet'


DEFAULT_MAINNET_API_URL = 'https://api.helius.xyz/v0'
DEFAULT_DEVNET_API_URL = 'https://api-devnet.helius.xyz/v0'
DEFAULT_MAINNET_RPC_URL = 'https://mainnet.helius-rpc.com'
DEFAULT_DEVNET_RPC_URL = 'https://devnet.helius-rpc.com'

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_WAIT_MIN = 0.5
DEFAULT_RETRY_WAIT_MAX = 5.0

_API_URLS = {Network.MAINNET: DEFAULT_MAINNET_API_URL, Network.DEVNET: DEFAULT_DEVNET_API_URL}
_RPC_URLS = {Network.MAINNET: DEFAULT_MAINNET_RPC_URL, Network.DEVNET: DEFAULT_DEVNET_RPC_URL}


@dataclass(frozen=True)
class ClientConfig:
    """Construction-time client settings.

    ``api_url``/``rpc_url`` override the network-derived defaults when set.
    ``transport`` is a single-attempt Transport (see transport.py) and
    ``logger`` anything exposing debug/info/warning/error; both default to
    the library's own. Use ``dataclasses.replace`` to derive variants.
    """
    api_key: str
    network: Network = Network.MAINNET
    api_url: Optional[str] = None
    rpc_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_wait_min: float = DEFAULT_RETRY_WAIT_MIN
    retry_wait_max: float = DEFAULT_RETRY_WAIT_MAX
    retry_statuses: FrozenSet[int] = frozenset()
    transport: Any = None
    logger: Any = None

    def __post_init__(self):
        if not self.api_key:
            raise ApiValidationError('API key is required', 'client')
        object.__setattr__(self, 'network', Network(self.network))
        object.__setattr__(self, 'retry_statuses', frozenset(self.retry_statuses))
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.retry_wait_min < 0 or self.retry_wait_max < self.retry_wait_min:
            raise ValueError(f"invalid retry wait bounds: {self.retry_wait_min}..{self.retry_wait_max}")

    @property
    def resolved_api_url(self) -> str:
        return self.api_url or _API_URLS[self.network]

    @property
    def resolved_rpc_url(self) -> str:
        return self.rpc_url or _RPC_URLS[self.network]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> 'ClientConfig':
        env = os.environ if environ is None else environ
        values: dict = {
            'api_key': env.get('HELIUS_API_KEY', ''),
            'network': env.get('HELIUS_NETWORK') or Network.MAINNET,
            'api_url': env.get('HELIUS_API_URL') or None,
            'rpc_url': env.get('HELIUS_RPC_URL') or None,
        }
        if env.get('HELIUS_TIMEOUT'):
            values['timeout'] = _parse_env(env, 'HELIUS_TIMEOUT', float)
        if env.get('HELIUS_MAX_RETRIES'):
            values['max_retries'] = _parse_env(env, 'HELIUS_MAX_RETRIES', int)
        values.update(overrides)
        return cls(**values)


def _parse_env(env: Mapping[str, str], name: str, kind: Any) -> Any:
    raw = env[name]
    try:
        return kind(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be {kind.__name__}, got {raw!r}") from e


def load_env_file(env_path: Path) -> None:
    """Load KEY=VALUE lines into os.environ without a python-dotenv dependency.

    Existing non-empty variables are preserved.
    """
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v
