from __future__ import annotations

import math
import typing as t

Complex = t.Tuple[float, float]


class Algebra:
    @staticmethod
    def solve_quadratic(a: float, b: float, c: float) -> t.Tuple[float, ...]:
        """Real roots of ``a*x**2 + b*x + c``, larger first; empty when none exist."""
        if a == 0:
            raise ValueError("coefficient a must be non-zero for a quadratic equation")
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return ()
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))

    @staticmethod
    def evaluate_polynomial(coefficients: t.Sequence[float], x: float) -> float:
        # coefficients are [a0, a1, ..., an]
        return sum(coeff * x**power for power, coeff in enumerate(coefficients))

    @staticmethod
    def complex_add(a: Complex, b: Complex) -> Complex:
        return (a[0] + b[0], a[1] + b[1])

    @staticmethod
    def complex_multiply(a: Complex, b: Complex) -> Complex:
        return (a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])
