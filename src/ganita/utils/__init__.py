"""Configuration helpers."""

from .config import BenchmarkConfig, CacheConfig, GanitaConfig, MathConfig

__all__ = [
    "BenchmarkConfig",
    "CacheConfig",
    "GanitaConfig",
    "MathConfig",
]
