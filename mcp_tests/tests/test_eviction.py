import pytest

from core.errors import UnsupportedConfigurationError
from core.eviction import FIFOStrategy, LRUStrategy, UnboundedStrategy, get_eviction_strategy
from core.models import CacheMode


def test_lru_victim_is_least_recently_accessed():
    s = LRUStrategy()
    s.notify_inserted("a")
    s.notify_inserted("b")
    s.notify_accessed("a")

    assert s.select_victim() == "b"


def test_lru_reinsert_refreshes_recency():
    s = LRUStrategy()
    s.notify_inserted("a")
    s.notify_inserted("b")
    s.notify_inserted("a")

    assert s.select_victim() == "b"


def test_lru_access_of_unknown_key_is_ignored():
    s = LRUStrategy()
    s.notify_accessed("ghost")
    assert s.select_victim() is None


def test_fifo_victim_is_first_inserted():
    s = FIFOStrategy()
    s.notify_inserted("a")
    s.notify_inserted("b")
    s.notify_accessed("a")
    s.notify_inserted("a")

    assert s.select_victim() == "a"

    s.notify_removed("a")
    assert s.select_victim() == "b"


def test_strategies_clear_bookkeeping():
    for s in (LRUStrategy(), FIFOStrategy()):
        s.notify_inserted("a")
        s.clear()
        assert s.select_victim() is None


def test_unbounded_never_selects():
    s = UnboundedStrategy()
    s.notify_inserted("a")
    assert s.select_victim() is None


@pytest.mark.parametrize(
    "mode, capacity, expected",
    [
        ("LRU", 10, LRUStrategy),
        ("fifo", 10, FIFOStrategy),
        (CacheMode.UNLIMITED, 10, UnboundedStrategy),
        (CacheMode.LRU, -1, UnboundedStrategy),
    ],
)
def test_get_eviction_strategy(mode, capacity, expected):
    assert isinstance(get_eviction_strategy(mode, capacity=capacity), expected)


def test_get_eviction_strategy_unknown():
    with pytest.raises(UnsupportedConfigurationError):
        get_eviction_strategy("RANDOM", capacity=10)
