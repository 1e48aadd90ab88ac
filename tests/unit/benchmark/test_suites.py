"""Unit tests for the math benchmark suites."""

import pytest

from ganita.benchmark import render, run_math_suite, run_single
from ganita.utils.config import BenchmarkConfig

SMALL = {"primes": 50, "matrix": 3, "vector": 10, "data": 20, "angles": 10}


@pytest.mark.asyncio
class TestSuites:
    """Test run_math_suite and run_single."""

    async def test_full_suite_groups(self, advanced):
        """Test the suite covers every area."""
        results = await run_math_suite(advanced, BenchmarkConfig(iterations=2), seed=1, sizes=SMALL)

        assert set(results) == {"primes", "matrices", "vectors", "statistics", "trigonometry"}
        assert list(results["vectors"]) == ["dot", "add", "normalize"]
        assert list(results["statistics"]) == ["mean", "median", "std_dev"]
        assert results["primes"]["primes_up_to"].iterations == 2

        text = render(results)
        assert "[primes]" in text
        assert "matrix_multiply:" in text

    async def test_suite_warms_caches(self, advanced):
        """Test cached operations leave entries behind."""
        await run_math_suite(advanced, BenchmarkConfig(iterations=2), seed=1, sizes=SMALL)
        assert advanced.caches.primes.size() == 1
        assert advanced.caches.matrices.size() == 1
        assert advanced.caches.statistics.size() == 2

    async def test_run_single(self, advanced):
        """Test benchmarking one named operation."""
        results = await run_single(advanced, "gcd", (48, 18), BenchmarkConfig(iterations=5))
        assert results["gcd"].iterations == 5

    async def test_run_single_unknown(self, advanced):
        """Test unknown operation names are rejected."""
        with pytest.raises(ValueError, match="unknown operation"):
            await run_single(advanced, "nope")
