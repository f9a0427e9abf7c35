from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional

from .geometry import distance

@dataclass
class PointSet:
    coords: List[Tuple[float, float]]
    name: str = "euclidean_points"

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        if n < 0:
            raise ValueError("n must be >= 0")
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return PointSet(coords=coords, name=name)

    def n_points(self) -> int:
        return len(self.coords)

    def perimeter(self) -> float:
        """Closed-polygon length of the points in their stored order."""
        n = self.n_points()
        if n < 2:
            return 0.0
        return sum(distance(self.coords[k], self.coords[(k + 1) % n]) for k in range(n))
