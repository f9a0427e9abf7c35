from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest
from hypothesis import HealthCheck, settings

from touring import Tour

settings.register_profile(
    "ci",
    max_examples=80,
    deadline=None,
    print_blob=True,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("ci")


def make_chain(points) -> Tour:
    """Tour whose traversal is exactly ``points``, built with insert_after."""
    tour = Tour()
    prev = None
    for p in points:
        if prev is None:
            tour.insert_first(p)
        else:
            tour.insert_after(p, prev)
        prev = p
    return tour


def cycle_slots(tour: Tour):
    """Follow successor links from the reference slot until it comes back."""
    seen = []
    k = tour._ref
    for _ in range(len(tour) + 1):
        seen.append(k)
        k = tour._next[k]
        if k == tour._ref:
            return seen
    raise AssertionError("successor links do not close into a single cycle")


@pytest.fixture
def two_cycle() -> Tour:
    return make_chain([(0, 0), (10, 0)])


@pytest.fixture
def square() -> Tour:
    return make_chain([(0, 0), (10, 0), (10, 10), (0, 10)])
