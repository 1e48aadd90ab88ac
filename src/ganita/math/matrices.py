from __future__ import annotations

import typing as t

from ..cache import MISSING, TTLCache
from ..errors import DimensionMismatchError

Matrix = t.Sequence[t.Sequence[float]]


def _shape(m: Matrix) -> t.Tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise DimensionMismatchError("matrix rows must all have the same length")
    return rows, cols


class Matrices:
    def __init__(self, cache: t.Optional[TTLCache] = None) -> None:
        self._cache = cache if cache is not None else TTLCache(name="matrices")

    @staticmethod
    def add(a: Matrix, b: Matrix) -> t.List[t.List[float]]:
        if _shape(a) != _shape(b):
            raise DimensionMismatchError(f"cannot add matrices of shape {_shape(a)} and {_shape(b)}")
        return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]

    def multiply(self, a: Matrix, b: Matrix) -> t.List[t.List[float]]:
        rows, inner = _shape(a)
        inner_b, cols = _shape(b)
        if inner != inner_b:
            raise DimensionMismatchError(f"cannot multiply matrices of shape {(rows, inner)} and {(inner_b, cols)}")

        key = ("multiply", [list(r) for r in a], [list(r) for r in b])
        cached = self._cache.get(key, MISSING)
        if cached is not MISSING:
            return [list(row) for row in cached]

        result = [[sum(a[i][k] * b[k][j] for k in range(inner)) for j in range(cols)] for i in range(rows)]

        self._cache.set(key, tuple(tuple(row) for row in result))
        return result
