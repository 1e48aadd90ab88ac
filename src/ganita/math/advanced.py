from __future__ import annotations

import typing as t

from ..utils.config import MathConfig
from .algebra import Algebra, Complex
from .caches import MathCaches
from .geometry import Geometry
from .matrices import Matrices, Matrix
from .number_theory import NumberTheory
from .statistics import Statistics
from .trigonometry import Trigonometry
from .vectors import Vectors


class AdvancedMath:
    """Facade over the math groups, wired to one set of caches.

    Each instance owns its caches; two instances never share results.
    """

    # names accepted by the single-operation benchmark
    OPERATIONS = (
        "fibonacci",
        "is_prime",
        "matrix_add",
        "matrix_multiply",
        "mode",
        "complex_add",
        "complex_multiply",
        "triangle_area",
        "circle_area",
        "gcd",
        "lcm",
        "prime_factorization",
    )

    def __init__(self, caches: t.Optional[MathCaches] = None) -> None:
        self.caches = caches if caches is not None else MathCaches.from_config()
        self.number_theory = NumberTheory(self.caches.primes, self.caches.factors, self.caches.results)
        self.algebra = Algebra()
        self.trigonometry = Trigonometry()
        self.statistics = Statistics(self.caches.statistics)
        self.vectors = Vectors()
        self.matrices = Matrices(self.caches.matrices)
        self.geometry = Geometry()

    @classmethod
    def from_config(cls, config: t.Optional[MathConfig] = None) -> "AdvancedMath":
        return cls(MathCaches.from_config(config))

    def fibonacci(self, n: int) -> t.List[int]:
        return self.number_theory.fibonacci(n)

    def is_prime(self, n: int) -> bool:
        return self.number_theory.is_prime(n)

    def matrix_add(self, a: Matrix, b: Matrix) -> t.List[t.List[float]]:
        return self.matrices.add(a, b)

    def matrix_multiply(self, a: Matrix, b: Matrix) -> t.List[t.List[float]]:
        return self.matrices.multiply(a, b)

    def mode(self, values: t.Sequence[float]) -> float:
        return self.statistics.mode(values)

    def complex_add(self, a: Complex, b: Complex) -> Complex:
        return self.algebra.complex_add(a, b)

    def complex_multiply(self, a: Complex, b: Complex) -> Complex:
        return self.algebra.complex_multiply(a, b)

    def triangle_area(self, base: float, height: float) -> float:
        return self.geometry.triangle_area(base, height)

    def circle_area(self, radius: float) -> float:
        return self.geometry.circle_area(radius)

    def gcd(self, a: int, b: int) -> int:
        return self.number_theory.gcd(a, b)

    def lcm(self, a: int, b: int) -> int:
        return self.number_theory.lcm(a, b)

    def prime_factorization(self, n: int) -> t.Dict[int, int]:
        return self.number_theory.prime_factorization(n)
