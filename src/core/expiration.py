"""Per-entry time-to-live handling.

ExpirationPolicy keeps the process-wide default TTL and turns a
requested TTL into an absolute monotonic deadline. Staleness is only
ever checked lazily, when an entry is read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from core.models import TTL, Expiration, as_expiration

if TYPE_CHECKING:
    from core.cache import CacheEntry


class ExpirationPolicy:
    def __init__(self, default: TTL) -> None:
        self._default = as_expiration(default)

    @property
    def default(self) -> Expiration:
        return self._default

    @default.setter
    def default(self, value: TTL) -> None:
        # Expiration rejects negative durations on construction
        self._default = as_expiration(value)

    def deadline(self, now: float, ttl: Optional[TTL] = None) -> Optional[float]:
        # None means "use the default"; an explicit 0 is stale on next read
        expiration = self._default if ttl is None else as_expiration(ttl)
        seconds = expiration.to_seconds()
        if seconds is None:
            return None
        return now + seconds

    @staticmethod
    def is_stale(entry: "CacheEntry", now: float) -> bool:
        return entry.expires_at is not None and now >= entry.expires_at
