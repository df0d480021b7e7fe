"""Pluggable eviction strategies for the cache core.

Strategies only track key order; the cache owns the entries and calls
the notify_* hooks under its own lock, so strategies are not
thread-safe on their own.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Optional, Protocol

from core.models import CacheMode


class EvictionStrategy(Protocol):
    """Contract for deciding which key to discard when the cache is full."""
    def notify_inserted(self, key: str) -> None:
        ...

    def notify_accessed(self, key: str) -> None:
        ...

    def notify_removed(self, key: str) -> None:
        ...

    def select_victim(self) -> Optional[str]:
        ...

    def clear(self) -> None:
        ...


class LRUStrategy:
    # Least recently used first; OrderedDict end is the most recent key
    def __init__(self) -> None:
        self._order: "OrderedDict[str, None]" = OrderedDict()

    def notify_inserted(self, key: str) -> None:
        self._order[key] = None
        self._order.move_to_end(key, last=True)

    def notify_accessed(self, key: str) -> None:
        if key in self._order:
            self._order.move_to_end(key, last=True)

    def notify_removed(self, key: str) -> None:
        self._order.pop(key, None)

    def select_victim(self) -> Optional[str]:
        return next(iter(self._order), None)

    def clear(self) -> None:
        self._order.clear()


class FIFOStrategy:
    # Insertion order only; reads and overwrites keep the original slot
    def __init__(self) -> None:
        self._order: "OrderedDict[str, None]" = OrderedDict()

    def notify_inserted(self, key: str) -> None:
        self._order.setdefault(key, None)

    def notify_accessed(self, key: str) -> None:
        return None

    def notify_removed(self, key: str) -> None:
        self._order.pop(key, None)

    def select_victim(self) -> Optional[str]:
        return next(iter(self._order), None)

    def clear(self) -> None:
        self._order.clear()


class UnboundedStrategy:
    def notify_inserted(self, key: str) -> None:
        return None

    def notify_accessed(self, key: str) -> None:
        return None

    def notify_removed(self, key: str) -> None:
        return None

    def select_victim(self) -> Optional[str]:
        return None

    def clear(self) -> None:
        return None


def get_eviction_strategy(mode: CacheMode, *, capacity: int) -> EvictionStrategy:
    """
    Factory that returns the strategy for an eviction mode.

    Unknown modes are rejected by CacheMode.parse (UnsupportedConfigurationError).
    A negative capacity always means unbounded, whatever the mode.
    """
    mode = CacheMode.parse(mode)

    if mode is CacheMode.UNLIMITED or capacity < 0:
        return UnboundedStrategy()
    if mode is CacheMode.LRU:
        return LRUStrategy()
    return FIFOStrategy()
