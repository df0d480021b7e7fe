"""Cache service facade used by application code and the MCP tools.

Validates and encodes caller keys, then delegates to the cache core.
The core is built by initialize() from an immutable CacheConfig; the
service refuses to work before that and after shutdown().
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from core.cache import Cache
from core.errors import CacheStateError, InvalidKeyError, NotInitializedError
from core.eviction import get_eviction_strategy
from core.keys import encode_key
from core.models import ABSENT, TTL, CacheConfig, CacheMode, Expiration, ReadResult

logger = logging.getLogger(__name__)


class CacheService:
    def __init__(self, config: Optional[CacheConfig] = None) -> None:
        self._config = config or CacheConfig()
        self._cache: Optional[Cache[Any]] = None
        self._closed = False
        self._state_lock = threading.Lock()

    @property
    def config(self) -> CacheConfig:
        return self._config

    def initialize(self) -> None:
        with self._state_lock:
            if self._closed:
                raise CacheStateError("Cache service has been shut down")
            if self._cache is not None:
                raise CacheStateError("Cache service is already initialized")

            cfg = self._config
            # Unlimited mode ignores the configured capacity
            capacity = -1 if cfg.mode is CacheMode.UNLIMITED else cfg.capacity
            strategy = get_eviction_strategy(cfg.mode, capacity=capacity)
            self._cache = Cache(
                strategy=strategy,
                capacity=capacity,
                blocking=cfg.blocking,
                default_ttl=cfg.default_ttl,
            )

        logger.info(
            "Cache initialized [mode=%s, capacity=%s, blocking=%s, default_ttl=%s]",
            cfg.mode.value,
            cfg.capacity,
            cfg.blocking,
            cfg.default_ttl,
        )

    def shutdown(self) -> None:
        with self._state_lock:
            cache, self._cache = self._cache, None
            self._closed = True

        if cache is not None:
            cache.clear()
            logger.info("Cache shut down")

    def store(self, key: Any, value: Any, ttl: Optional[TTL] = None) -> bool:
        """Store value under key.

        ttl=None uses the default TTL, 0 makes the entry stale on the next
        read and Expiration.never() keeps it fresh until removed.
        """
        return self._require().set(self._encode(key), value, ttl)

    def lookup(self, key: Any, *, timeout: Optional[float] = None) -> ReadResult:
        """Read key and return the tagged result (Fresh, Stale or ABSENT)."""
        if timeout is None:
            timeout = self._config.read_timeout
        return self._require().get(self._encode(key), timeout=timeout)

    def read(self, key: Any, *, timeout: Optional[float] = None) -> Any:
        result = self.lookup(key, timeout=timeout)
        if result is ABSENT:
            return None
        return result.value

    def remove(self, key: Any) -> Any:
        result = self._require().pop(self._encode(key))
        if result is ABSENT:
            return None
        return result.value

    def release(self, key: Any) -> bool:
        return self._require().release(self._encode(key))

    def clear(self) -> None:
        self._require().clear()

    @property
    def default_ttl(self) -> Expiration:
        return self._require().default_ttl

    @default_ttl.setter
    def default_ttl(self, value: TTL) -> None:
        self._require().default_ttl = value

    def _require(self) -> Cache[Any]:
        cache = self._cache
        if cache is None:
            raise NotInitializedError("Cache service is not initialized")
        return cache

    @staticmethod
    def _encode(key: Any) -> str:
        if key is None:
            raise InvalidKeyError("Key must not be None")
        return encode_key(key)
