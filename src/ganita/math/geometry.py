from __future__ import annotations

import math


class Geometry:
    @staticmethod
    def triangle_area(base: float, height: float) -> float:
        return base * height / 2

    @staticmethod
    def circle_area(radius: float) -> float:
        return math.pi * radius * radius
