from __future__ import annotations

import math
import typing as t


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1 / value


class Trigonometry:
    PI = math.pi

    @classmethod
    def to_radians(cls, degrees: float) -> float:
        return degrees * cls.PI / 180

    @classmethod
    def to_degrees(cls, radians: float) -> float:
        return radians * 180 / cls.PI

    @staticmethod
    def ratios(angle: float) -> t.Dict[str, float]:
        """All six ratios for ``angle`` in radians; undefined ones are infinite."""
        sine = math.sin(angle)
        cosine = math.cos(angle)
        tangent = math.tan(angle)
        return {
            "sine": sine,
            "cosine": cosine,
            "tangent": tangent,
            "cotangent": _reciprocal(tangent),
            "secant": _reciprocal(cosine),
            "cosecant": _reciprocal(sine),
        }
