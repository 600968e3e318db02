from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from .exceptions import ApiEncodingError

API_KEY_PARAM = 'api-key'
BODY_METHODS = ('POST', 'PUT')
BODYLESS_METHODS = ('GET', 'DELETE')


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


def with_api_key(url: str, api_key: str) -> str:
    sep = '&' if '?' in url else '?'
    return f"{url}{sep}{urlencode({API_KEY_PARAM: api_key})}"


def encode_payload(payload: Any, *, operation: Optional[str] = None) -> bytes:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode='json', by_alias=True, exclude_none=True)
    try:
        return json.dumps(payload, allow_nan=False, separators=(',', ':')).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise ApiEncodingError(f"marshal request: {e}", operation=operation) from e


def build_request(base_url: str, path: str, api_key: str, method: str, payload: Any = None, *, operation: Optional[str] = None) -> Request:
    """Build a ready-to-send request; performs no I/O."""
    method = method.upper()
    if method not in BODY_METHODS + BODYLESS_METHODS:
        raise ValueError(f"unsupported method: {method}")
    url = with_api_key(base_url.rstrip('/') + '/' + path.lstrip('/'), api_key)
    headers = {'Accept': 'application/json'}
    body = None
    if method in BODY_METHODS and payload is not None:
        body = encode_payload(payload, operation=operation)
        headers['Content-Type'] = 'application/json'
    return Request(method=method, path=path, url=url, body=body, headers=headers)


def redact_url(url: str) -> str:
    """Mask the api-key value so URLs can be logged."""
    marker = API_KEY_PARAM + '='
    idx = url.find(marker)
    if idx < 0:
        return url
    start = idx + len(marker)
    end = url.find('&', start)
    return url[:start] + '***' + (url[end:] if end >= 0 else '')
