from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..cache import TTLCache
from ..utils.config import MathConfig


@dataclass
class MathCaches:
    """One cache per group of memoized math results."""

    primes: TTLCache
    factors: TTLCache
    matrices: TTLCache
    statistics: TTLCache
    results: TTLCache

    @classmethod
    def from_config(cls, config: Optional[MathConfig] = None) -> "MathCaches":
        config = config or MathConfig()
        return cls(
            primes=TTLCache.from_config(config.primes, name="primes"),
            factors=TTLCache.from_config(config.factors, name="factors"),
            matrices=TTLCache.from_config(config.matrices, name="matrices"),
            statistics=TTLCache.from_config(config.statistics, name="statistics"),
            results=TTLCache.from_config(config.results, name="results"),
        )

    def all(self) -> Tuple[TTLCache, ...]:
        return (self.primes, self.factors, self.matrices, self.statistics, self.results)

    def clear(self) -> None:
        for cache in self.all():
            cache.clear()

    def purge_expired(self) -> int:
        return sum(cache.purge_expired() for cache in self.all())
