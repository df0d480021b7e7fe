from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache service."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised when user input is invalid (negative TTL, bad capacity)."""


class InvalidKeyError(InvalidArgumentError):
    """Raised when a key is missing or cannot be compared by value."""


class UnsupportedConfigurationError(CacheError):
    """Raised when an eviction mode is not recognized."""


class CacheStateError(CacheError):
    """Raised when the service is used outside its lifecycle."""


class NotInitializedError(CacheStateError):
    """Raised when the service is used before initialize() or after shutdown()."""
