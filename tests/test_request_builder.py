import json
import math
from urllib.parse import parse_qs, urlparse

import pytest

from helius_client.exceptions import ApiEncodingError, ApiRequestError
from helius_client.models import CreateWebhookRequest, TransactionType
from helius_client.request_builder import build_request, redact_url

BASE = 'https://api.helius.xyz/v0'


@pytest.mark.parametrize('method', ['GET', 'POST', 'PUT', 'DELETE'])
def test_api_key_on_every_verb(method):
    req = build_request(BASE, '/webhooks', 'secret-key', method, {'a': 1})
    assert parse_qs(urlparse(req.url).query)['api-key'] == ['secret-key']
    assert req.url.startswith(BASE + '/webhooks?')


@pytest.mark.parametrize('method', ['GET', 'DELETE'])
def test_bodyless_verbs(method):
    req = build_request(BASE, '/webhooks/abc', 'k', method, {'ignored': True})
    assert req.body is None
    assert 'Content-Type' not in req.headers


def test_post_serializes_json():
    req = build_request(BASE, '/assets', 'k', 'post', {'id': 'mint1'})
    assert req.method == 'POST'
    assert json.loads(req.body) == {'id': 'mint1'}
    assert req.headers['Content-Type'] == 'application/json'


def test_pydantic_payload_uses_wire_names():
    payload = CreateWebhookRequest(
        webhook_url='https://example.com/hook',
        transaction_types=[TransactionType.SWAP],
        account_addresses=['addr1'],
    )
    req = build_request(BASE, '/webhooks', 'k', 'POST', payload)
    assert json.loads(req.body) == {
        'webhookURL': 'https://example.com/hook',
        'transactionTypes': ['SWAP'],
        'accountAddresses': ['addr1'],
    }


def test_api_key_is_url_encoded():
    req = build_request(BASE, '/assets', 'a&b=c', 'POST', {})
    assert parse_qs(urlparse(req.url).query)['api-key'] == ['a&b=c']


def test_existing_query_is_preserved():
    req = build_request(BASE, '/assets?page=2', 'k', 'GET')
    q = parse_qs(urlparse(req.url).query)
    assert q['page'] == ['2'] and q['api-key'] == ['k']


@pytest.mark.parametrize('payload', [{'bad': object()}, {'nan': math.nan}, {'when': {1, 2}}])
def test_unserializable_payload_is_encoding_error(payload):
    with pytest.raises(ApiEncodingError) as ei:
        build_request(BASE, '/assets', 'k', 'POST', payload, operation='get_asset')
    assert isinstance(ei.value, ApiRequestError)
    assert ei.value.operation == 'get_asset'
    assert isinstance(ei.value.__cause__, (TypeError, ValueError))


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        build_request(BASE, '/assets', 'k', 'PATCH')


def test_redact_url():
    assert redact_url('https://x/v0/assets?api-key=secret') == 'https://x/v0/assets?api-key=***'
    assert redact_url('https://x/v0/a?page=1&api-key=secret&x=2') == 'https://x/v0/a?page=1&api-key=***&x=2'
    assert redact_url('https://x/v0/a') == 'https://x/v0/a'
