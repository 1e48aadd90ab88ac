from __future__ import annotations

import math
import typing as t

from ..errors import DimensionMismatchError, ZeroVectorError

Vector = t.Sequence[float]

TOLERANCE = 1e-10


def _same_length(a: Vector, b: Vector) -> None:
    if len(a) != len(b):
        raise DimensionMismatchError(f"vector dimensions differ: {len(a)} != {len(b)}")


class Vectors:
    @staticmethod
    def magnitude(v: Vector) -> float:
        return math.sqrt(sum(c * c for c in v))

    @staticmethod
    def add(a: Vector, b: Vector) -> t.List[float]:
        _same_length(a, b)
        return [x + y for x, y in zip(a, b)]

    @staticmethod
    def subtract(a: Vector, b: Vector) -> t.List[float]:
        _same_length(a, b)
        return [x - y for x, y in zip(a, b)]

    @staticmethod
    def dot(a: Vector, b: Vector) -> float:
        _same_length(a, b)
        return sum(x * y for x, y in zip(a, b))

    @staticmethod
    def cross(a: Vector, b: Vector) -> t.List[float]:
        if len(a) != 3 or len(b) != 3:
            raise DimensionMismatchError("cross product is only defined for 3-dimensional vectors")
        return [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]

    @staticmethod
    def scale(v: Vector, factor: float) -> t.List[float]:
        return [c * factor for c in v]

    @classmethod
    def normalize(cls, v: Vector) -> t.List[float]:
        length = cls.magnitude(v)
        if length == 0:
            raise ZeroVectorError("cannot normalize a zero vector")
        return cls.scale(v, 1 / length)

    @classmethod
    def angle(cls, a: Vector, b: Vector) -> float:
        """Angle between ``a`` and ``b`` in radians."""
        product = cls.dot(a, b)
        lengths = cls.magnitude(a) * cls.magnitude(b)
        if lengths == 0:
            raise ZeroVectorError("angle is undefined for a zero vector")
        # clamp rounding noise outside acos' domain
        return math.acos(max(-1.0, min(1.0, product / lengths)))

    @staticmethod
    def is_parallel(a: Vector, b: Vector) -> bool:
        _same_length(a, b)
        for i in range(len(a)):
            for j in range(i + 1, len(a)):
                if abs(a[i] * b[j] - a[j] * b[i]) >= TOLERANCE:
                    return False
        return True

    @classmethod
    def is_perpendicular(cls, a: Vector, b: Vector) -> bool:
        return abs(cls.dot(a, b)) < TOLERANCE

    @classmethod
    def project(cls, a: Vector, b: Vector) -> t.List[float]:
        """Projection of ``a`` onto ``b``."""
        denominator = cls.dot(b, b)
        if denominator == 0:
            raise ZeroVectorError("cannot project onto a zero vector")
        return cls.scale(b, cls.dot(a, b) / denominator)
