"""Thread-safe in-memory cache with pluggable eviction and per-entry TTL.

Entries carry a monotonic expiration deadline that is checked lazily on
read. Expired entries are not dropped: they move through a small state
machine (fresh -> stale -> refresh pending) that decides whether readers
get the stale value or wait for a single refresher to store a new one.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

from core.eviction import EvictionStrategy
from core.expiration import ExpirationPolicy
from core.models import ABSENT, TTL, Expiration, Fresh, ReadResult, Stale

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    # Stores value + monotonic timestamps; expires_at None means never
    value: T
    created_at: float  # time.monotonic()
    expires_at: Optional[float]
    pending: bool = False
    # Created on first waiter, bound to the cache lock
    refreshed: Optional[threading.Condition] = None


class Cache(Generic[T]):
    """Key -> entry map guarded by a single lock.

    In blocking mode the first reader of a stale entry claims the refresh
    and gets ABSENT; later readers wait on the entry's condition until the
    claim is resolved by set(), release(), pop(), eviction or clear().
    In non-blocking mode every reader gets the stale value and only the
    first one is told it holds the claim.
    """

    def __init__(
        self,
        *,
        strategy: EvictionStrategy,
        capacity: int = -1,
        blocking: bool = False,
        default_ttl: TTL = Expiration.never(),
    ) -> None:
        self._strategy = strategy
        self._capacity = int(capacity)
        self._blocking = bool(blocking)
        self._expiration = ExpirationPolicy(default_ttl)
        self._lock = threading.Lock()
        self._entries: Dict[str, CacheEntry[T]] = {}

    @property
    def blocking(self) -> bool:
        return self._blocking

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def default_ttl(self) -> Expiration:
        with self._lock:
            return self._expiration.default

    @default_ttl.setter
    def default_ttl(self, value: TTL) -> None:
        with self._lock:
            self._expiration.default = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str, *, timeout: Optional[float] = None) -> ReadResult:
        deadline = None if timeout is None else time.monotonic() + max(0.0, timeout)

        with self._lock:
            while True:
                entry = self._entries.get(key)
                if entry is None:
                    return ABSENT

                now = time.monotonic()
                if not self._expiration.is_stale(entry, now):
                    self._strategy.notify_accessed(key)
                    return Fresh(entry.value)

                if not self._blocking:
                    # Serve stale; the first reader is told it owns the refresh
                    claimed = not entry.pending
                    entry.pending = True
                    self._strategy.notify_accessed(key)
                    return Stale(entry.value, claimed=claimed)

                if not entry.pending:
                    entry.pending = True
                    logger.debug("Refresh claimed for %s", key)
                    return ABSENT

                remaining = None if deadline is None else deadline - now
                if remaining is not None and remaining <= 0:
                    # Giving up leaves the claim with its owner
                    return Stale(entry.value, claimed=False)

                if entry.refreshed is None:
                    entry.refreshed = threading.Condition(self._lock)
                entry.refreshed.wait(remaining)

    def set(self, key: str, value: T, ttl: Optional[TTL] = None) -> bool:
        """Store value under key, replacing any previous entry.

        Returns False when the cache is at capacity and no victim could be
        evicted (only possible with a capacity of 0).
        """
        with self._lock:
            now = time.monotonic()
            expires_at = self._expiration.deadline(now, ttl)

            previous = self._entries.get(key)
            if previous is None and not self._make_room():
                logger.debug("Cache full, not admitting %s", key)
                return False

            self._entries[key] = CacheEntry(value=value, created_at=now, expires_at=expires_at)
            self._strategy.notify_inserted(key)

            if previous is not None:
                self._wake(previous)
            return True

    def pop(self, key: str) -> ReadResult:
        with self._lock:
            if key not in self._entries:
                return ABSENT

            entry = self._discard(key)
            if self._expiration.is_stale(entry, time.monotonic()):
                return Stale(entry.value)
            return Fresh(entry.value)

    def release(self, key: str) -> bool:
        # Drop a refresh claim without storing; one waiter takes it over
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or not entry.pending:
                return False

            entry.pending = False
            self._wake(entry)
            return True

    def clear(self) -> None:
        # Waiters blocked on any key wake up and see ABSENT
        with self._lock:
            entries = list(self._entries.values())
            self._entries.clear()
            self._strategy.clear()

            for entry in entries:
                self._wake(entry)

    def _make_room(self) -> bool:
        if self._capacity < 0 or len(self._entries) < self._capacity:
            return True

        victim = self._strategy.select_victim()
        if victim is None:
            return False
        if victim not in self._entries:
            raise AssertionError(f"Eviction strategy selected unknown key {victim!r}")

        self._discard(victim)
        logger.debug("Evicted %s", victim)
        return len(self._entries) < self._capacity

    def _discard(self, key: str) -> CacheEntry[T]:
        entry = self._entries.pop(key)
        self._strategy.notify_removed(key)
        self._wake(entry)
        return entry

    @staticmethod
    def _wake(entry: CacheEntry[T]) -> None:
        if entry.refreshed is not None:
            entry.refreshed.notify_all()
