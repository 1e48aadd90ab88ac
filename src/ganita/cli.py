from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, List, Optional, Tuple

import click

from .benchmark import render, report, run_math_suite, run_single
from .math import AdvancedMath
from .utils.config import BenchmarkConfig


def _parse_arg(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{raw!r} is not valid JSON: {exc.msg}", param_hint="ARGS") from exc


@click.group()
@click.option("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
@click.option("--iterations", default=1000, type=int, help="Maximum calls per measured function")
@click.option("--time-budget", default=5.0, type=float, help="Wall-clock budget per function, seconds")
@click.option("--memory/--no-memory", default=False, help="Report allocated memory per function")
@click.pass_context
def main(ctx: click.Context, log_level: str, iterations: int, time_budget: float, memory: bool) -> None:
    """Benchmark the ganita math helpers."""
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if iterations < 1:
        raise click.BadParameter("must be at least 1", param_hint="--iterations")
    ctx.obj = BenchmarkConfig(iterations=iterations, time_budget_seconds=time_budget, measure_memory=memory)


@main.command()
@click.option("--seed", default=None, type=int, help="Seed for the generated inputs")
@click.pass_obj
def bench(config: BenchmarkConfig, seed: Optional[int]) -> None:
    """Run the full benchmark suite."""
    results = asyncio.run(run_math_suite(AdvancedMath(), config, seed=seed))
    click.echo(render(results))


@main.command("bench-one")
@click.argument("operation", type=click.Choice(AdvancedMath.OPERATIONS))
@click.argument("args", nargs=-1)
@click.pass_obj
def bench_one(config: BenchmarkConfig, operation: str, args: Tuple[str, ...]) -> None:
    """Benchmark a single OPERATION; ARGS are JSON values, e.g. `gcd 48 18`."""
    parsed: List[Any] = [_parse_arg(raw) for raw in args]
    results = asyncio.run(run_single(AdvancedMath(), operation, parsed, config))
    click.echo(f"{operation} benchmark:")
    click.echo(report(results))


if __name__ == "__main__":
    main()
