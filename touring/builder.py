from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import Point, is_finite
from .modes import CHEAPEST, insert
from .tour import Tour


class TourBuilder:
    """What a drawing front end talks to: add points, read the tour back, clear.

    The insertion mode is passed with every ``add_point`` call; the builder
    keeps no notion of a currently selected mode.
    """

    def __init__(self, tour: Optional[Tour] = None):
        self.tour = tour if tour is not None else Tour()

    def add_point(self, coordinate: Sequence[float], mode: str = CHEAPEST) -> Point:
        try:
            p = Point.of(coordinate)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid coordinate {coordinate!r}") from exc
        if not is_finite(p):
            raise ValueError(f"coordinate must be finite, got {coordinate!r}")
        insert(self.tour, p, mode)
        return p

    def get_ordered_points(self) -> List[Point]:
        return self.tour.points()

    def get_polyline(self) -> Tuple[np.ndarray, np.ndarray]:
        """x and y arrays of the tour, closed back onto its first point."""
        pts = self.tour.points()
        if pts:
            pts.append(pts[0])
        arr = np.asarray(pts, dtype=float).reshape(-1, 2)
        return arr[:, 0], arr[:, 1]

    def get_total_length(self) -> float:
        return self.tour.total_length()

    def clear(self):
        self.tour.reset()
