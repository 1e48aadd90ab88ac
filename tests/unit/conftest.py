"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from ganita.cache import TTLCache
from ganita.math import AdvancedMath, MathCaches
from ganita.monitoring import metrics


class FakeClock:
    """Manually advanced clock for deterministic expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Cache with a 10s TTL driven by the fake clock."""
    return TTLCache(ttl_seconds=10, max_entries=100, clock=clock)


@pytest.fixture
def advanced():
    """Facade with its own fresh caches."""
    return AdvancedMath(MathCaches.from_config())


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.cache_requests_total.reset()
    metrics.cache_evictions_total.reset()
    metrics.benchmark_call_seconds.reset()
    yield
