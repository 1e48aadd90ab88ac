from __future__ import annotations

import math
import typing as t

from ..cache import MISSING, TTLCache


class NumberTheory:
    def __init__(
        self,
        primes_cache: t.Optional[TTLCache] = None,
        factors_cache: t.Optional[TTLCache] = None,
        results_cache: t.Optional[TTLCache] = None,
    ) -> None:
        self._primes = primes_cache if primes_cache is not None else TTLCache(ttl_seconds=3600.0, name="primes")
        self._factors = factors_cache if factors_cache is not None else TTLCache(name="factors")
        self._results = results_cache if results_cache is not None else TTLCache(name="number_theory")

    @staticmethod
    def is_prime(n: int) -> bool:
        if n <= 1:
            return False
        for i in range(2, math.isqrt(n) + 1):
            if n % i == 0:
                return False
        return True

    def primes_up_to(self, limit: int) -> t.List[int]:
        """Sieve of Eratosthenes over ``[2, limit]``."""
        cached = self._primes.get(limit, MISSING)
        if cached is not MISSING:
            return list(cached)

        if limit < 2:
            result: t.Tuple[int, ...] = ()
        else:
            sieve = [True] * (limit + 1)
            sieve[0] = sieve[1] = False
            for i in range(2, math.isqrt(limit) + 1):
                if sieve[i]:
                    for j in range(i * i, limit + 1, i):
                        sieve[j] = False
            result = tuple(n for n, prime in enumerate(sieve) if prime)

        self._primes.set(limit, result)
        return list(result)

    def prime_factorization(self, n: int) -> t.Dict[int, int]:
        """Map of prime factor -> power for ``abs(n)``."""
        cached = self._factors.get(n, MISSING)
        if cached is not MISSING:
            return dict(cached)

        factors: t.Dict[int, int] = {}
        rest = abs(n)
        i = 2
        while i * i <= rest:
            while rest % i == 0:
                factors[i] = factors.get(i, 0) + 1
                rest //= i
            i += 1
        if rest > 1:
            factors[rest] = factors.get(rest, 0) + 1

        self._factors.set(n, tuple(factors.items()))
        return factors

    def gcd(self, a: int, b: int) -> int:
        key = f"gcd_{a}_{b}"
        cached = self._results.get(key, MISSING)
        if cached is not MISSING:
            return cached
        while b != 0:
            a, b = b, a % b
        result = abs(a)
        self._results.set(key, result)
        return result

    def lcm(self, a: int, b: int) -> int:
        key = f"lcm_{a}_{b}"
        cached = self._results.get(key, MISSING)
        if cached is not MISSING:
            return cached
        divisor = self.gcd(a, b)
        result = 0 if divisor == 0 else abs(a * b) // divisor
        self._results.set(key, result)
        return result

    @staticmethod
    def fibonacci(n: int) -> t.List[int]:
        """First ``n`` Fibonacci numbers, starting at 0."""
        series: t.List[int] = []
        a, b = 0, 1
        for _ in range(max(n, 0)):
            series.append(a)
            a, b = b, a + b
        return series
