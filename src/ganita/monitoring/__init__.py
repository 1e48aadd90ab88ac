from .metrics import (
    Counter,
    Histogram,
    benchmark_call_seconds,
    cache_evictions_total,
    cache_requests_total,
)

__all__ = [
    "Counter",
    "Histogram",
    "benchmark_call_seconds",
    "cache_evictions_total",
    "cache_requests_total",
]
