from __future__ import annotations

import math
import typing as t

from ..cache import MISSING, TTLCache
from ..errors import EmptySeriesError, SeriesLengthError


def _require_values(values: t.Sequence[float], minimum: int = 1) -> None:
    if len(values) < minimum:
        raise EmptySeriesError(f"need at least {minimum} value(s), got {len(values)}")


class Statistics:
    """Descriptive statistics; median, standard deviation and correlation are cached."""

    def __init__(self, cache: t.Optional[TTLCache] = None) -> None:
        self._cache = cache if cache is not None else TTLCache(name="statistics")

    @staticmethod
    def mean(values: t.Sequence[float]) -> float:
        _require_values(values)
        return sum(values) / len(values)

    def median(self, values: t.Sequence[float]) -> float:
        _require_values(values)
        key = ("median", list(values))
        cached = self._cache.get(key, MISSING)
        if cached is not MISSING:
            return cached

        ordered = sorted(values)
        middle = len(ordered) // 2
        if len(ordered) % 2 == 0:
            result = (ordered[middle - 1] + ordered[middle]) / 2
        else:
            result = ordered[middle]

        self._cache.set(key, result)
        return result

    def std_dev(self, values: t.Sequence[float]) -> float:
        """Sample standard deviation (Bessel's correction)."""
        _require_values(values, minimum=2)
        key = ("std_dev", list(values))
        cached = self._cache.get(key, MISSING)
        if cached is not MISSING:
            return cached

        avg = self.mean(values)
        squares = sum((v - avg) ** 2 for v in values)
        result = math.sqrt(squares / (len(values) - 1))

        self._cache.set(key, result)
        return result

    def correlation(self, xs: t.Sequence[float], ys: t.Sequence[float]) -> float:
        """Pearson correlation coefficient of two equally long series."""
        if len(xs) != len(ys):
            raise SeriesLengthError(f"series lengths differ: {len(xs)} != {len(ys)}")
        _require_values(xs)
        key = ("correlation", list(xs), list(ys))
        cached = self._cache.get(key, MISSING)
        if cached is not MISSING:
            return cached

        x_mean = self.mean(xs)
        y_mean = self.mean(ys)
        numerator = x_den = y_den = 0.0
        for x, y in zip(xs, ys):
            dx = x - x_mean
            dy = y - y_mean
            numerator += dx * dy
            x_den += dx * dx
            y_den += dy * dy

        denominator = math.sqrt(x_den * y_den)
        # constant series have no defined correlation
        result = numerator / denominator if denominator else math.nan

        self._cache.set(key, result)
        return result

    @staticmethod
    def mode(values: t.Sequence[float]) -> float:
        """Most frequent value; ties go to the value that reached the count first."""
        _require_values(values)
        counts: t.Dict[float, int] = {}
        best = values[0]
        best_count = 0
        for v in values:
            counts[v] = counts.get(v, 0) + 1
            if counts[v] > best_count:
                best_count = counts[v]
                best = v
        return best
