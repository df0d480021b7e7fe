import datetime as dt

import pytest

from core.cache import CacheEntry
from core.errors import InvalidArgumentError
from core.expiration import ExpirationPolicy
from core.models import Expiration, TimeUnit, as_expiration


def _entry(expires_at):
    return CacheEntry(value="v", created_at=0.0, expires_at=expires_at)


def test_expiration_units_convert_to_whole_seconds():
    assert Expiration(2, TimeUnit.MINUTES).to_seconds() == 120
    assert Expiration(1500, TimeUnit.MILLISECONDS).to_seconds() == 1
    assert Expiration(0.5).to_seconds() == 0
    assert Expiration.never().to_seconds() is None


def test_expiration_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        Expiration(-1)


def test_as_expiration_accepts_timedelta_and_numbers():
    assert as_expiration(dt.timedelta(minutes=1)).to_seconds() == 60
    assert as_expiration(30).to_seconds() == 30
    assert as_expiration(Expiration.never()).is_never

    with pytest.raises(InvalidArgumentError):
        as_expiration("30")
    with pytest.raises(InvalidArgumentError):
        as_expiration(True)


def test_policy_deadline_uses_default_when_ttl_missing():
    policy = ExpirationPolicy(Expiration(10))

    assert policy.deadline(100.0) == 110.0
    assert policy.deadline(100.0, 0) == 100.0
    assert policy.deadline(100.0, Expiration.never()) is None


def test_policy_never_default():
    policy = ExpirationPolicy(Expiration.never())
    assert policy.deadline(5.0) is None
    assert policy.deadline(5.0, 3) == 8.0


def test_policy_default_setter_guards_negative():
    policy = ExpirationPolicy(10)

    policy.default = dt.timedelta(seconds=5)
    assert policy.default.to_seconds() == 5

    with pytest.raises(InvalidArgumentError):
        policy.default = -5
    assert policy.default.to_seconds() == 5


def test_is_stale():
    assert ExpirationPolicy.is_stale(_entry(None), 1e12) is False
    assert ExpirationPolicy.is_stale(_entry(10.0), 9.99) is False
    assert ExpirationPolicy.is_stale(_entry(10.0), 10.0) is True
