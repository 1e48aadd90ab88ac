from __future__ import annotations

import gc
import inspect
import logging
import time
import tracemalloc
import typing as t
from dataclasses import dataclass

from ..monitoring import metrics
from ..utils.config import BenchmarkConfig

_logger = logging.getLogger(__name__)


@dataclass
class Performance:
    mean_ms: float
    min_ms: float
    max_ms: float
    memory_bytes: int
    iterations: int


def _current_memory() -> int:
    gc.collect()
    current, _peak = tracemalloc.get_traced_memory()
    return current


async def measure(
    fn: t.Callable[..., t.Any],
    args: t.Sequence[t.Any] = (),
    *,
    iterations: int = 1000,
    time_budget_seconds: float = 5.0,
    measure_memory: bool = False,
    name: str = "fn",
) -> Performance:
    """Call ``fn(*args)`` sequentially and time each call.

    Awaitable results are awaited before the call is timed as finished. The
    loop stops early once ``time_budget_seconds`` has elapsed; at least one
    call always runs.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations!r}")

    started_tracing = False
    memory_start = memory_end = 0
    if measure_memory:
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            started_tracing = True
        memory_start = _current_memory()

    timings: t.List[float] = []
    began = time.monotonic()
    try:
        for _ in range(iterations):
            start = time.perf_counter()
            result = fn(*args)
            if inspect.isawaitable(result):
                await result
            elapsed = time.perf_counter() - start
            timings.append(elapsed * 1000.0)
            metrics.benchmark_call_seconds.observe(elapsed, name=name)

            if time.monotonic() - began > time_budget_seconds:
                _logger.info(
                    "benchmark %s: time budget %.2fs exhausted after %d/%d iterations",
                    name,
                    time_budget_seconds,
                    len(timings),
                    iterations,
                )
                break

        if measure_memory:
            memory_end = _current_memory()
    finally:
        if started_tracing:
            tracemalloc.stop()

    return Performance(
        mean_ms=sum(timings) / len(timings),
        min_ms=min(timings),
        max_ms=max(timings),
        memory_bytes=memory_end - memory_start,
        iterations=len(timings),
    )


async def measure_with_config(
    fn: t.Callable[..., t.Any],
    args: t.Sequence[t.Any] = (),
    config: t.Optional[BenchmarkConfig] = None,
    *,
    name: str = "fn",
) -> Performance:
    config = config or BenchmarkConfig()
    return await measure(
        fn,
        args,
        iterations=config.iterations,
        time_budget_seconds=config.time_budget_seconds,
        measure_memory=config.measure_memory,
        name=name,
    )


async def compare(
    fns: t.Sequence[t.Callable[..., t.Any]],
    args_list: t.Optional[t.Sequence[t.Sequence[t.Any]]] = None,
    *,
    names: t.Optional[t.Sequence[str]] = None,
    config: t.Optional[BenchmarkConfig] = None,
) -> t.Dict[str, Performance]:
    """Measure each function in turn; missing names default to ``fn_<n>``."""
    args_list = list(args_list or [])
    names = list(names or [])
    results: t.Dict[str, Performance] = {}
    for i, fn in enumerate(fns):
        name = names[i] if i < len(names) and names[i] else f"fn_{i + 1}"
        args = args_list[i] if i < len(args_list) else ()
        results[name] = await measure_with_config(fn, args, config, name=name)
    return results


def report(results: t.Mapping[str, Performance]) -> str:
    lines = ["Performance report", "==================", ""]
    if not results:
        return "\n".join(lines)

    fastest = min(results, key=lambda n: results[n].mean_ms)
    for name, perf in results.items():
        lines.append(f"{name}:")
        lines.append("-----------------")
        lines.append(f"mean: {perf.mean_ms:.3f}ms")
        lines.append(f"min: {perf.min_ms:.3f}ms")
        lines.append(f"max: {perf.max_ms:.3f}ms")
        if perf.memory_bytes > 0:
            lines.append(f"memory: {perf.memory_bytes / 1024:.2f}KB")
        lines.append(f"iterations: {perf.iterations}")
        if name != fastest and results[fastest].mean_ms > 0:
            slowdown = (perf.mean_ms / results[fastest].mean_ms - 1) * 100
            lines.append(f"slower than {fastest}: {slowdown:.1f}%")
        lines.append("")
    return "\n".join(lines)
