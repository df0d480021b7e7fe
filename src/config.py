"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
CACHE_MODE, CACHE_CAPACITY, CACHE_BLOCKING, the default TTL and the
read timeout), plus load_cache_config() to bundle them.
"""

from __future__ import annotations

import os
from typing import Optional

from core.models import CacheConfig, Expiration, TimeUnit


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_optional_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_ttl(name: str, unit: str) -> Expiration:
    # "never" (or unset) disables expiration
    raw = (os.environ.get(name) or "").strip().lower()
    if not raw or raw == "never":
        return Expiration.never()
    try:
        duration = float(raw)
    except ValueError:
        return Expiration.never()
    return Expiration(duration, TimeUnit.parse(unit))


# Eviction
CACHE_MODE = os.environ.get("CACHE_MODE", "LRU").strip()
CACHE_CAPACITY = _env_int("CACHE_CAPACITY", -1)

# Stampede control
CACHE_BLOCKING = _env_bool("CACHE_BLOCKING", False)
CACHE_READ_TIMEOUT = _env_optional_float("CACHE_READ_TIMEOUT", None)

# Expiration
CACHE_DEFAULT_TTL_UNIT = os.environ.get("CACHE_DEFAULT_TTL_UNIT", "seconds").strip()
CACHE_DEFAULT_TTL = _env_ttl("CACHE_DEFAULT_TTL", CACHE_DEFAULT_TTL_UNIT)

# Logging (stderr; stdout belongs to the stdio transport)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()


def load_cache_config() -> CacheConfig:
    return CacheConfig(
        mode=CACHE_MODE,
        capacity=CACHE_CAPACITY,
        blocking=CACHE_BLOCKING,
        read_timeout=CACHE_READ_TIMEOUT,
        default_ttl=CACHE_DEFAULT_TTL,
    )
