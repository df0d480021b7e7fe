"""Canonical, value-based key encoding.

Turns any caller key into a stable SHA-256 hex digest. Keys are first
serialized into a tagged, length-prefixed byte form so that values which
compare equal produce the same bytes and different values cannot be
confused by concatenation.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import hashlib
import math
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, List

from core.errors import InvalidKeyError


def encode_key(key: Any) -> str:
    if key is None:
        raise InvalidKeyError("Key must not be None")
    return hashlib.sha256(_canonical(key)).hexdigest()


def _frame(tag: bytes, payload: bytes) -> bytes:
    # tag + length + payload keeps nested forms unambiguous
    return tag + len(payload).to_bytes(8, "big") + payload


def _number(value: Any) -> bytes:
    # Follow Python equality: True == 1 == 1.0 == Decimal("1")
    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidKeyError("NaN is not equal to itself and cannot be a key")
        if math.isinf(value):
            return _frame(b"f", repr(value).encode("ascii"))
        if value.is_integer():
            return _frame(b"i", str(int(value)).encode("ascii"))
        return _frame(b"q", _ratio(*value.as_integer_ratio()))
    if isinstance(value, Decimal):
        if not value.is_finite():
            if value.is_nan():
                raise InvalidKeyError("NaN is not equal to itself and cannot be a key")
            return _frame(b"f", repr(float(value)).encode("ascii"))
        if value == value.to_integral_value():
            return _frame(b"i", str(int(value)).encode("ascii"))
        return _frame(b"q", _ratio(*value.as_integer_ratio()))
    return _frame(b"i", str(int(value)).encode("ascii"))


def _ratio(numerator: int, denominator: int) -> bytes:
    return f"{numerator}/{denominator}".encode("ascii")


def _sequence(tag: bytes, items: List[bytes]) -> bytes:
    return _frame(tag, b"".join(items))


def _type_name(value: Any) -> bytes:
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}".encode("utf-8")


def _canonical(value: Any) -> bytes:
    if value is None:
        return _frame(b"n", b"")
    # str/int mixin enums compare equal to their plain value, so they come first
    if isinstance(value, str):
        return _frame(b"s", str.encode(value, "utf-8", "surrogatepass"))
    if isinstance(value, (bytes, bytearray)):
        return _frame(b"b", bytes(value))
    if isinstance(value, (bool, int, float, Decimal)):
        return _number(value)
    if isinstance(value, Enum):
        return _frame(b"e", _frame(b"t", _type_name(value)) + _canonical(value.value))
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return _sequence(b"T", [_canonical(v) for v in value])
    if isinstance(value, list):
        return _sequence(b"L", [_canonical(v) for v in value])
    if isinstance(value, (set, frozenset)):
        return _sequence(b"S", sorted(_canonical(v) for v in value))
    if isinstance(value, dict):
        items = sorted(_canonical(k) + _canonical(v) for k, v in value.items())
        return _sequence(b"D", items)
    if isinstance(value, uuid.UUID):
        return _frame(b"u", value.bytes)
    if isinstance(value, dt.datetime) and value.utcoffset() is not None:
        # Aware datetimes are equal when they name the same instant
        utc = value.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return _frame(b"z", utc.isoformat().encode("ascii"))
    if isinstance(value, (dt.datetime, dt.date, dt.time, dt.timedelta)):
        return _frame(b"d", _frame(b"t", _type_name(value)) + repr(value).encode("utf-8"))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = [
            _canonical(f.name) + _canonical(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if f.compare
        ]
        return _frame(b"o", _frame(b"t", _type_name(value)) + b"".join(fields))
    if hasattr(value, "_fields"):
        # namedtuple compares equal to a plain tuple with the same items
        return _sequence(b"T", [_canonical(v) for v in value])
    if type(value).__eq__ is not object.__eq__ and hasattr(value, "__dict__"):
        items = sorted(_canonical(k) + _canonical(v) for k, v in vars(value).items())
        return _frame(b"o", _frame(b"t", _type_name(value)) + b"".join(items))

    raise InvalidKeyError(f"Key of type {type(value).__name__} is not comparable by value")
