"""Immutable value objects shared by the cache core and the service.

Includes the eviction mode selector, TTL values (Expiration), the
configuration bundle (CacheConfig) and the tagged read results
(Fresh, Stale, ABSENT) returned instead of raising on a miss.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from core.errors import InvalidArgumentError, UnsupportedConfigurationError


class CacheMode(str, Enum):
    LRU = "LRU"
    FIFO = "FIFO"
    UNLIMITED = "UNLIMITED"

    @classmethod
    def parse(cls, raw: Union[str, "CacheMode"]) -> "CacheMode":
        if isinstance(raw, CacheMode):
            return raw
        name = (raw or "").strip().upper()
        try:
            return cls(name)
        except ValueError as e:
            raise UnsupportedConfigurationError(f"Unsupported cache mode: {raw!r}") from e


class TimeUnit(Enum):
    # Value is the number of seconds in one unit
    MILLISECONDS = 0.001
    SECONDS = 1
    MINUTES = 60
    HOURS = 3600
    DAYS = 86400

    @classmethod
    def parse(cls, raw: Union[str, "TimeUnit"]) -> "TimeUnit":
        if isinstance(raw, TimeUnit):
            return raw
        name = (raw or "").strip().upper()
        try:
            return cls[name]
        except KeyError as e:
            raise InvalidArgumentError(f"Unknown time unit: {raw!r}") from e


@dataclass(frozen=True)
class Expiration:
    """A time-to-live expressed as a duration plus unit.

    ``Expiration.never()`` means the entry never goes stale; a zero
    duration means it is stale on the next read.
    """

    duration: float
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self) -> None:
        if math.isnan(self.duration) or self.duration < 0:
            raise InvalidArgumentError("TTL must not be negative")

    @classmethod
    def never(cls) -> "Expiration":
        return cls(math.inf)

    @property
    def is_never(self) -> bool:
        return math.isinf(self.duration)

    def to_seconds(self) -> Optional[int]:
        # Truncated to whole seconds
        if self.is_never:
            return None
        return int(self.duration * self.unit.value)


TTL = Union[Expiration, dt.timedelta, int, float]


def as_expiration(ttl: TTL) -> Expiration:
    if isinstance(ttl, Expiration):
        return ttl
    if isinstance(ttl, dt.timedelta):
        return Expiration(ttl.total_seconds())
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidArgumentError(f"Unsupported TTL value: {ttl!r}")
    return Expiration(float(ttl))


@dataclass(frozen=True)
class CacheConfig:
    """Configuration bundle captured once when the service is initialized.

    Field groups:
    - Eviction: mode, capacity (-1 means unbounded)
    - Stampede control: blocking, read_timeout (None waits forever)
    - Expiration: default_ttl
    """

    mode: CacheMode = CacheMode.LRU
    capacity: int = -1

    blocking: bool = False
    read_timeout: Optional[float] = None

    default_ttl: Expiration = field(default_factory=Expiration.never)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", CacheMode.parse(self.mode))
        object.__setattr__(self, "default_ttl", as_expiration(self.default_ttl))
        if int(self.capacity) < -1:
            raise InvalidArgumentError("capacity must be -1 (unbounded) or non-negative")
        if self.read_timeout is not None and self.read_timeout < 0:
            raise InvalidArgumentError("read_timeout must not be negative")


@dataclass(frozen=True)
class Fresh:
    value: Any


@dataclass(frozen=True)
class Stale:
    # claimed is True only for the caller that took the refresh claim
    value: Any
    claimed: bool = False


class Absent:
    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()

ReadResult = Union[Fresh, Stale, Absent]
