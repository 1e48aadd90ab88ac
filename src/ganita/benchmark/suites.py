from __future__ import annotations

import logging
import math
import random
import typing as t

from ..math import AdvancedMath
from ..utils.config import BenchmarkConfig
from .harness import Performance, compare, measure_with_config, report

_logger = logging.getLogger(__name__)


def _random_matrix(size: int, rng: random.Random) -> t.List[t.List[float]]:
    return [[rng.random() for _ in range(size)] for _ in range(size)]


async def run_math_suite(
    advanced: AdvancedMath,
    config: t.Optional[BenchmarkConfig] = None,
    *,
    seed: t.Optional[int] = None,
    sizes: t.Optional[t.Dict[str, int]] = None,
) -> t.Dict[str, t.Dict[str, Performance]]:
    """Benchmark the cached and uncached math operations, grouped by area."""
    rng = random.Random(seed)
    sizes = {"primes": 1000, "matrix": 50, "vector": 1000, "data": 10000, "angles": 1000, **(sizes or {})}
    results: t.Dict[str, t.Dict[str, Performance]] = {}

    _logger.info("running prime sieve benchmark")
    results["primes"] = {
        "primes_up_to": await measure_with_config(
            advanced.number_theory.primes_up_to, (sizes["primes"],), config, name="primes_up_to"
        )
    }

    _logger.info("running matrix multiplication benchmark")
    a = _random_matrix(sizes["matrix"], rng)
    b = _random_matrix(sizes["matrix"], rng)
    results["matrices"] = {
        "matrix_multiply": await measure_with_config(advanced.matrix_multiply, (a, b), config, name="matrix_multiply")
    }

    _logger.info("running vector benchmark")
    v1 = [rng.random() for _ in range(sizes["vector"])]
    v2 = [rng.random() for _ in range(sizes["vector"])]
    results["vectors"] = await compare(
        [advanced.vectors.dot, advanced.vectors.add, advanced.vectors.normalize],
        [(v1, v2), (v1, v2), (v1,)],
        names=["dot", "add", "normalize"],
        config=config,
    )

    _logger.info("running statistics benchmark")
    data = [rng.random() * 1000 for _ in range(sizes["data"])]
    results["statistics"] = await compare(
        [advanced.statistics.mean, advanced.statistics.median, advanced.statistics.std_dev],
        [(data,), (data,), (data,)],
        names=["mean", "median", "std_dev"],
        config=config,
    )

    _logger.info("running trigonometry benchmark")
    angles = [rng.random() * 2 * math.pi for _ in range(sizes["angles"])]

    def all_ratios() -> None:
        for angle in angles:
            advanced.trigonometry.ratios(angle)

    results["trigonometry"] = {"ratios": await measure_with_config(all_ratios, (), config, name="ratios")}
    return results


async def run_single(
    advanced: AdvancedMath,
    operation: str,
    args: t.Sequence[t.Any] = (),
    config: t.Optional[BenchmarkConfig] = None,
) -> t.Dict[str, Performance]:
    """Benchmark one facade operation by name, e.g. ``run_single(m, "gcd", (48, 18))``."""
    if operation not in AdvancedMath.OPERATIONS:
        raise ValueError(f"unknown operation {operation!r}; expected one of {', '.join(AdvancedMath.OPERATIONS)}")
    fn = getattr(advanced, operation)
    return {operation: await measure_with_config(fn, args, config, name=operation)}


def render(results: t.Mapping[str, t.Mapping[str, Performance]]) -> str:
    return "\n".join(f"[{group}]\n{report(group_results)}" for group, group_results in results.items())
