import pytest

from core.models import CacheConfig
from services.cache_service import CacheService


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


class FakeClock:
    """Replacement for time.monotonic driven by the test."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_clock(monkeypatch):
    import core.cache as cache_mod

    clock = FakeClock()
    monkeypatch.setattr(cache_mod.time, "monotonic", clock)
    return clock


@pytest.fixture
def cache_service():
    service = CacheService(CacheConfig(mode="LRU", capacity=10, default_ttl=60))
    service.initialize()
    yield service
    service.shutdown()
