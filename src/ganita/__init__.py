"""ganita

Mathematical helpers (number theory, algebra, trigonometry, statistics,
vectors, matrices) backed by a bounded TTL memoization cache, plus an async
microbenchmark harness.
"""

from .cache import MISSING, Memoized, TTLCache, configure, derive_key, memoize
from .errors import (
    DimensionMismatchError,
    EmptySeriesError,
    GanitaError,
    SeriesLengthError,
    ZeroVectorError,
)
from .math import AdvancedMath, MathCaches
from .utils.config import BenchmarkConfig, CacheConfig, GanitaConfig, MathConfig

__all__ = [
    "AdvancedMath",
    "BenchmarkConfig",
    "CacheConfig",
    "DimensionMismatchError",
    "EmptySeriesError",
    "GanitaConfig",
    "GanitaError",
    "MISSING",
    "MathCaches",
    "MathConfig",
    "Memoized",
    "SeriesLengthError",
    "TTLCache",
    "ZeroVectorError",
    "configure",
    "derive_key",
    "memoize",
]

__version__ = "0.1.0"
