from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CacheConfig:
    ttl_seconds: float = 300.0
    max_entries: int = 1000
    sort_keys: bool = False


@dataclass
class MathConfig:
    primes: CacheConfig = dataclasses.field(default_factory=lambda: CacheConfig(ttl_seconds=3600.0))
    factors: CacheConfig = dataclasses.field(default_factory=CacheConfig)
    matrices: CacheConfig = dataclasses.field(default_factory=CacheConfig)
    statistics: CacheConfig = dataclasses.field(default_factory=CacheConfig)
    results: CacheConfig = dataclasses.field(default_factory=CacheConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MathConfig":
        defaults = cls()
        values = {}
        for f in dataclasses.fields(cls):
            if f.name in data:
                values[f.name] = CacheConfig(**data[f.name])
            else:
                values[f.name] = getattr(defaults, f.name)
        return cls(**values)


@dataclass
class BenchmarkConfig:
    iterations: int = 1000
    time_budget_seconds: float = 5.0
    measure_memory: bool = False


@dataclass
class GanitaConfig:
    math: MathConfig = dataclasses.field(default_factory=MathConfig)
    benchmark: BenchmarkConfig = dataclasses.field(default_factory=BenchmarkConfig)
    memoize: CacheConfig = dataclasses.field(default_factory=CacheConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GanitaConfig":
        return cls(
            math=MathConfig.from_dict(data.get("math", {})),
            benchmark=BenchmarkConfig(**data.get("benchmark", {})),
            memoize=CacheConfig(**data.get("memoize", {})),
        )
