from __future__ import annotations
from typing import Iterable, Sequence

from .tour import Tour

FIRST = "first"
NEAREST = "nearest"
CHEAPEST = "cheapest"
MODES = (FIRST, NEAREST, CHEAPEST)


def _mode_method(tour: Tour, mode: str):
    if mode == FIRST:
        return tour.insert_first
    if mode == NEAREST:
        return tour.nearest_insertion
    if mode == CHEAPEST:
        return tour.cheapest_insertion
    raise ValueError(f"Unknown insertion mode {mode!r} (expected one of {', '.join(MODES)})")


def insert(tour: Tour, point: Sequence[float], mode: str):
    _mode_method(tour, mode)(point)


def build_tour(points: Iterable[Sequence[float]], mode: str) -> Tour:
    """Replay ``points`` in order into a fresh tour using one insertion mode."""
    tour = Tour()
    add = _mode_method(tour, mode)
    for p in points:
        add(p)
    return tour
