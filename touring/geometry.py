from __future__ import annotations
import math
from typing import NamedTuple, Sequence


class Point(NamedTuple):
    x: float
    y: float

    @staticmethod
    def of(obj: Sequence[float]) -> "Point":
        """Build a Point from any (x, y) pair, promoting coordinates to float."""
        if len(obj) != 2:
            raise ValueError(f"expected an (x, y) pair, got {obj!r}")
        return Point(float(obj[0]), float(obj[1]))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def is_finite(p: Sequence[float]) -> bool:
    return math.isfinite(p[0]) and math.isfinite(p[1])
