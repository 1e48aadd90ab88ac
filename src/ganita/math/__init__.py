"""Mathematical helpers backed by injected TTL caches."""

from .advanced import AdvancedMath
from .algebra import Algebra
from .caches import MathCaches
from .geometry import Geometry
from .matrices import Matrices
from .number_theory import NumberTheory
from .statistics import Statistics
from .trigonometry import Trigonometry
from .vectors import Vectors

__all__ = [
    "AdvancedMath",
    "Algebra",
    "Geometry",
    "MathCaches",
    "Matrices",
    "NumberTheory",
    "Statistics",
    "Trigonometry",
    "Vectors",
]
