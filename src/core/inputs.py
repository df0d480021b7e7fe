from __future__ import annotations

from typing import Any, Optional

from core.errors import InvalidArgumentError, InvalidKeyError


def normalize_key(key: Any) -> Any:
    # JSON has no tuples: arrays become tuples so compound keys stay stable
    if key is None:
        raise InvalidKeyError("Missing key")
    if isinstance(key, str):
        if not key.strip():
            raise InvalidKeyError("key must be non-empty")
        return key
    if isinstance(key, list):
        return tuple(normalize_key(k) if isinstance(k, list) else k for k in key)
    return key


def normalize_seconds(value: Optional[float], *, name: str) -> Optional[float]:
    if value is None:
        return None
    seconds = float(value)
    if seconds < 0:
        raise InvalidArgumentError(f"{name} must not be negative")
    return seconds
