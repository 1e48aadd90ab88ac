from .harness import Performance, compare, measure, measure_with_config, report
from .suites import render, run_math_suite, run_single

__all__ = [
    "Performance",
    "compare",
    "measure",
    "measure_with_config",
    "render",
    "report",
    "run_math_suite",
    "run_single",
]
