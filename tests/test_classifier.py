import pytest

from helius_client import classifier
from helius_client.exceptions import (
    ApiAuthError,
    ApiError,
    ApiRateLimitError,
    ApiRequestError,
    ApiTransportError,
    ApiValidationError,
    as_api_error,
)
from helius_client.transport import RawResponse

SAMPLED = [200, 201, 204, 301, 399, 400, 401, 402, 403, 404, 409, 422, 429, 499, 500, 502, 503, 599, 600]


@pytest.mark.parametrize('code', range(400, 500))
def test_client_band(code):
    assert classifier.is_client_error(code)
    assert not classifier.is_server_error(code)


@pytest.mark.parametrize('code', range(500, 600))
def test_server_band(code):
    assert classifier.is_server_error(code)
    assert not classifier.is_client_error(code)


@pytest.mark.parametrize('code, client, server', [
    (399, False, False),
    (400, True, False),
    (499, True, False),
    (500, False, True),
    (599, False, True),
    (600, False, False),
])
def test_band_boundaries(code, client, server):
    assert classifier.is_client_error(code) is client
    assert classifier.is_server_error(code) is server


@pytest.mark.parametrize('predicate, only', [
    (classifier.is_not_found, 404),
    (classifier.is_rate_limited, 429),
    (classifier.is_unauthorized, 401),
    (classifier.is_forbidden, 403),
])
def test_single_status_predicates(predicate, only):
    for code in SAMPLED:
        assert predicate(code) is (code == only), f'{predicate.__name__}({code})'


def test_success_body_passes_through_unchanged():
    raw = RawResponse(status_code=200, body=b'{"id":"abc"}')
    assert classifier.classify(raw, '/assets') == b'{"id":"abc"}'


def test_error_keeps_raw_body_as_message():
    raw = RawResponse(status_code=404, body=b'<html>not found</html>')
    with pytest.raises(ApiError) as ei:
        classifier.classify(raw, '/assets', operation='get_asset')
    err = ei.value
    assert err.status_code == 404
    assert err.message == '<html>not found</html>'
    assert err.path == '/assets'
    assert err.operation == 'get_asset'
    assert err.is_not_found() and err.is_client_error()
    assert not err.is_server_error()
    assert '/assets returned status 404' in str(err)


@pytest.mark.parametrize('code, cls', [
    (401, ApiAuthError),
    (403, ApiAuthError),
    (429, ApiRateLimitError),
    (400, ApiError),
    (500, ApiError),
])
def test_error_subclass_by_status(code, cls):
    err = classifier.error_for_status(code, 'x', '/p')
    assert type(err) is cls
    assert isinstance(err, ApiRequestError)


def test_validation_error_is_client_side_400():
    err = ApiValidationError('asset ID is required', '/assets')
    assert err.status_code == 400
    assert err.client_side
    assert not classifier.error_for_status(400, 'bad', '/assets').client_side


def test_as_api_error_walks_cause_chain():
    inner = ApiError(503, 'busy', '/assets')
    try:
        try:
            raise inner
        except ApiError as e:
            raise RuntimeError('wrapped') from e
    except RuntimeError as outer:
        assert as_api_error(outer) is inner
    assert as_api_error(ApiTransportError('down')) is None
    assert as_api_error(None) is None
