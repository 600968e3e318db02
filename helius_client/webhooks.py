"""Helpers for receiving webhook deliveries."""
from __future__ import annotations
import hashlib
import hmac
import json
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from .exceptions import ApiDecodeError
from .models import WebhookEvent

SIGNATURE_HEADER = 'X-Helius-Signature'


def validate_webhook_signature(body: bytes, signature: str, secret: str) -> bool:
    """Check the hex HMAC-SHA256 of ``body`` against ``signature`` in constant time."""
    if not signature or not secret:
        return False
    expected = hmac.new(secret.encode('utf-8'), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected.encode('ascii'), signature.encode('utf-8'))


def parse_webhook_event(body: Union[bytes, str]) -> WebhookEvent:
    try:
        return WebhookEvent.model_validate_json(body)
    except ValidationError as e:
        raise ApiDecodeError(f"parse webhook event: {e}") from e


def parse_webhook_events(body: Union[bytes, str]) -> List[WebhookEvent]:
    """Parse a delivery holding either a list of events or a single event."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ApiDecodeError(f"parse webhook events: {e}") from e
    try:
        if isinstance(data, list):
            return TypeAdapter(List[WebhookEvent]).validate_python(data)
        return [WebhookEvent.model_validate(data)]
    except ValidationError as e:
        raise ApiDecodeError(f"parse webhook events: {e}") from e
