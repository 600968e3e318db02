import dataclasses
import logging
import os

import pytest

from helius_client import HeliusClient
from helius_client.config import (
    DEFAULT_DEVNET_API_URL,
    DEFAULT_DEVNET_RPC_URL,
    DEFAULT_MAINNET_API_URL,
    DEFAULT_MAINNET_RPC_URL,
    ClientConfig,
    Network,
    load_env_file,
)
from helius_client.exceptions import ApiValidationError
from helius_client.transport import RequestsTransport


def test_defaults():
    cfg = ClientConfig(api_key='k')
    assert cfg.network is Network.MAINNET
    assert cfg.resolved_api_url == DEFAULT_MAINNET_API_URL
    assert cfg.resolved_rpc_url == DEFAULT_MAINNET_RPC_URL
    assert cfg.timeout == 10.0
    assert cfg.max_retries == 3
    assert (cfg.retry_wait_min, cfg.retry_wait_max) == (0.5, 5.0)


def test_devnet_urls():
    cfg = ClientConfig(api_key='k', network='devnet')
    assert cfg.network is Network.DEVNET
    assert cfg.resolved_api_url == DEFAULT_DEVNET_API_URL
    assert cfg.resolved_rpc_url == DEFAULT_DEVNET_RPC_URL


def test_explicit_urls_win_over_network():
    cfg = ClientConfig(api_key='k', network=Network.DEVNET, api_url='https://custom-api.example.com', rpc_url='https://custom-rpc.example.com')
    assert cfg.resolved_api_url == 'https://custom-api.example.com'
    assert cfg.resolved_rpc_url == 'https://custom-rpc.example.com'


def test_empty_api_key_is_validation_error():
    with pytest.raises(ApiValidationError) as ei:
        ClientConfig(api_key='')
    assert ei.value.status_code == 400
    assert ei.value.path == 'client'


@pytest.mark.parametrize('kw', [
    {'timeout': 0},
    {'timeout': -1},
    {'max_retries': -1},
    {'retry_wait_min': -0.1},
    {'retry_wait_min': 2.0, 'retry_wait_max': 1.0},
])
def test_invariants(kw):
    with pytest.raises(ValueError):
        ClientConfig(api_key='k', **kw)


def test_config_is_immutable():
    cfg = ClientConfig(api_key='k')
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.timeout = 1.0
    derived = dataclasses.replace(cfg, timeout=30.0)
    assert derived.timeout == 30.0 and cfg.timeout == 10.0


def test_from_env():
    env = {
        'HELIUS_API_KEY': 'env-key',
        'HELIUS_NETWORK': 'devnet',
        'HELIUS_TIMEOUT': '2.5',
        'HELIUS_MAX_RETRIES': '0',
    }
    cfg = ClientConfig.from_env(env)
    assert cfg.api_key == 'env-key'
    assert cfg.network is Network.DEVNET
    assert cfg.timeout == 2.5
    assert cfg.max_retries == 0
    assert ClientConfig.from_env(env, network='mainnet').network is Network.MAINNET


@pytest.mark.parametrize('name, value', [('HELIUS_TIMEOUT', 'soon'), ('HELIUS_MAX_RETRIES', '2.5')])
def test_from_env_rejects_non_numeric(name, value):
    with pytest.raises(ValueError, match=name):
        ClientConfig.from_env({'HELIUS_API_KEY': 'k', name: value})


def test_rpc_url_encodes_key_and_trims_slash():
    c = HeliusClient('k+/=', rpc_url='https://rpc.example.com/')
    assert c.rpc_url == 'https://rpc.example.com/?api-key=k%2B%2F%3D'


def test_from_env_missing_key():
    with pytest.raises(ApiValidationError):
        ClientConfig.from_env({})


def test_load_env_file_preserves_existing(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('# comment\nHELIUS_API_KEY="from-file"\nHELIUS_NETWORK=devnet\nbroken line\n', encoding='utf-8')
    monkeypatch.delenv('HELIUS_API_KEY', raising=False)
    monkeypatch.setenv('HELIUS_NETWORK', 'mainnet')
    load_env_file(env_file)
    assert os.environ['HELIUS_API_KEY'] == 'from-file'
    assert os.environ['HELIUS_NETWORK'] == 'mainnet'
    load_env_file(tmp_path / 'missing.env')


def test_client_construction_paths():
    c = HeliusClient('k', network='devnet')
    assert c.api_url == DEFAULT_DEVNET_API_URL
    assert c.rpc_url == f'{DEFAULT_DEVNET_RPC_URL}/?api-key=k'
    assert isinstance(c._transport.transport, RequestsTransport)
    assert c.logger is logging.getLogger('helius_client')
    c2 = HeliusClient.from_config(ClientConfig(api_key='k2', rpc_url='https://rpc.example.com'))
    assert c2.rpc_url == 'https://rpc.example.com/?api-key=k2'
    with pytest.raises(TypeError):
        HeliusClient('k', config=ClientConfig(api_key='k'))


def test_client_requires_api_key():
    with pytest.raises(ApiValidationError) as ei:
        HeliusClient('')
    assert ei.value.status_code == 400


def test_default_logger_is_silent():
    logger = logging.getLogger('helius_client')
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
