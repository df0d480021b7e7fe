import importlib

import pytest

import config as config_mod
from core.errors import UnsupportedConfigurationError
from core.models import CacheMode, Expiration, TimeUnit

_VARS = (
    "CACHE_MODE",
    "CACHE_CAPACITY",
    "CACHE_BLOCKING",
    "CACHE_READ_TIMEOUT",
    "CACHE_DEFAULT_TTL",
    "CACHE_DEFAULT_TTL_UNIT",
    "LOG_LEVEL",
)


@pytest.fixture
def reload_config(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_mod)

    yield _reload
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config_mod)


def test_defaults(reload_config):
    cfg = reload_config().load_cache_config()

    assert cfg.mode is CacheMode.LRU
    assert cfg.capacity == -1
    assert cfg.blocking is False
    assert cfg.read_timeout is None
    assert cfg.default_ttl.is_never


def test_env_overrides(reload_config):
    mod = reload_config(
        CACHE_MODE="fifo",
        CACHE_CAPACITY="100",
        CACHE_BLOCKING="yes",
        CACHE_READ_TIMEOUT="2.5",
        CACHE_DEFAULT_TTL="5",
        CACHE_DEFAULT_TTL_UNIT="minutes",
        LOG_LEVEL="debug",
    )
    cfg = mod.load_cache_config()

    assert cfg.mode is CacheMode.FIFO
    assert cfg.capacity == 100
    assert cfg.blocking is True
    assert cfg.read_timeout == 2.5
    assert cfg.default_ttl == Expiration(5.0, TimeUnit.MINUTES)
    assert cfg.default_ttl.to_seconds() == 300
    assert mod.LOG_LEVEL == "DEBUG"


def test_invalid_numbers_fall_back_to_defaults(reload_config):
    cfg = reload_config(
        CACHE_CAPACITY="lots",
        CACHE_READ_TIMEOUT="soon",
        CACHE_DEFAULT_TTL="later",
    ).load_cache_config()

    assert cfg.capacity == -1
    assert cfg.read_timeout is None
    assert cfg.default_ttl.is_never


def test_never_ttl(reload_config):
    cfg = reload_config(CACHE_DEFAULT_TTL="never").load_cache_config()
    assert cfg.default_ttl.is_never


def test_unknown_mode_rejected(reload_config):
    mod = reload_config(CACHE_MODE="random")
    with pytest.raises(UnsupportedConfigurationError):
        mod.load_cache_config()
