"""Typed client for the Helius APIs on Solana (DAS assets, webhooks, token holders, priority fees).

Usage example:
    from helius_client import HeliusClient
    client = HeliusClient.from_env()
    assets = client.get_assets_by_owner('wallet-address')

Standard Solana RPC calls are out of scope; pass ``client.rpc_url`` to a
Solana RPC library instead.
"""
import logging

from .analytics import TopHolderStats, calculate_priority_fee, calculate_top_holder_stats  # noqa: F401
from .client import HeliusClient  # noqa: F401
from .config import ClientConfig, Network  # noqa: F401
from .deadline import Deadline  # noqa: F401
from .exceptions import (  # noqa: F401
    ApiAuthError,
    ApiCancelledError,
    ApiDecodeError,
    ApiEncodingError,
    ApiError,
    ApiRateLimitError,
    ApiRequestError,
    ApiTransportError,
    ApiValidationError,
    as_api_error,
)
from .log import NullLogger  # noqa: F401
from .models import *  # noqa: F401,F403
from .pagination import Page, collect_all  # noqa: F401
from .transport import RawResponse, RequestsTransport, RetryPolicy, Transport  # noqa: F401
from .webhooks import parse_webhook_event, parse_webhook_events, validate_webhook_signature  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())
