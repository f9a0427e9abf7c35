from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple

from .geometry import Point, distance

# candidate labels reported by Tour.insertion_costs
BEFORE_REFERENCE = "before_reference"
AFTER_PREDECESSOR = "after_predecessor"
EDGE = "edge"


class Tour:
    """Closed tour over 2D points, grown one insertion at a time.

    Nodes live in an arena: slot ``k`` holds a point together with the
    indices of its successor and predecessor. ``_ref`` is the slot traversal
    starts from and is ``None`` exactly when the tour is empty.
    """

    def __init__(self):
        self._points: List[Point] = []
        self._next: List[int] = []
        self._prev: List[int] = []
        self._ref: Optional[int] = None

    # ------------------------------------------------------------------ #
    # read-only views
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return self._walk()

    def __repr__(self) -> str:
        return f"Tour({self.points()!r})"

    @property
    def reference(self) -> Optional[Point]:
        return None if self._ref is None else self._points[self._ref]

    def points(self) -> List[Point]:
        return list(self._walk())

    def _walk(self) -> Iterator[Point]:
        for k in self._slots():
            yield self._points[k]

    def _slots(self) -> Iterator[int]:
        if self._ref is None:
            return
        k = self._ref
        while True:
            yield k
            k = self._next[k]
            if k == self._ref:
                return

    def total_length(self) -> float:
        """Perimeter of the closed tour; 0.0 with fewer than two points."""
        first = prev = None
        n = 0
        total = 0.0
        for p in self._walk():
            if n == 0:
                first = p
            else:
                total += distance(prev, p)
            prev = p
            n += 1
        if n > 1:
            total += distance(prev, first)
        return total

    # ------------------------------------------------------------------ #
    # structural primitives
    # ------------------------------------------------------------------ #
    def _new_slot(self, p: Point) -> int:
        k = len(self._points)
        self._points.append(p)
        self._next.append(k)
        self._prev.append(k)
        return k

    def _link_after(self, k: int, anchor: int):
        nxt = self._next[anchor]
        self._next[k], self._prev[k] = nxt, anchor
        self._prev[nxt] = k
        self._next[anchor] = k

    def insert_first(self, p: Sequence[float]):
        """Splice ``p`` in front of the reference point and make it the new reference."""
        k = self._new_slot(Point.of(p))
        if self._ref is not None:
            self._link_after(k, self._prev[self._ref])
        self._ref = k

    def insert_after(self, p: Sequence[float], anchor: Sequence[float]):
        """Splice ``p`` right after the first point equal to ``anchor``.

        If no point matches, the tour is discarded and ``p`` becomes its
        sole point and reference. The heuristics always pass a point taken
        from the tour, so that branch only guards direct callers.
        """
        anchor = Point.of(anchor)
        found = None
        for k in self._slots():
            if self._points[k] == anchor:
                found = k
                break
        if found is None:
            self.reset()
            self.insert_first(p)
            return
        self._link_after(self._new_slot(Point.of(p)), found)

    def reset(self):
        self._points.clear()
        self._next.clear()
        self._prev.clear()
        self._ref = None

    # ------------------------------------------------------------------ #
    # heuristics
    # ------------------------------------------------------------------ #
    def nearest_insertion(self, p: Sequence[float]):
        """Insert ``p`` right after the existing point closest to it."""
        p = Point.of(p)
        closest = None
        closest_dist = 0.0
        for q in self._walk():
            d = distance(q, p)
            if closest is None or d < closest_dist:
                closest, closest_dist = q, d
        if closest is None:
            self.insert_first(p)
        else:
            self.insert_after(p, closest)

    def insertion_costs(self, p: Sequence[float]) -> List[Tuple[str, float]]:
        """Tour length after each candidate insertion of ``p``, in evaluation order.

        Empty for tours with fewer than two points. Otherwise the first two
        entries are the positions before the reference point and after its
        predecessor; then one ``edge`` entry per edge scanned from the
        reference point, ending at the edge into the reference's predecessor.
        """
        if len(self) < 2:
            return []
        p = Point.of(p)
        ref = self._ref
        base = self.total_length()
        costs = [
            (BEFORE_REFERENCE, base + distance(p, self._points[ref])),
            (AFTER_PREDECESSOR, base + distance(p, self._points[self._prev[ref]])),
        ]
        prev, nxt = ref, self._next[ref]
        while nxt != ref:
            a, b = self._points[prev], self._points[nxt]
            costs.append((EDGE, base - distance(a, b) + distance(p, a) + distance(p, b)))
            prev, nxt = nxt, self._next[nxt]
        return costs

    def cheapest_insertion(self, p: Sequence[float]):
        """Insert ``p`` where the resulting tour length grows the least."""
        p = Point.of(p)
        if self._ref is None:
            self.insert_first(p)
            return
        if self._next[self._ref] == self._ref:
            self.nearest_insertion(p)
            return

        costs = self.insertion_costs(p)
        best = 0
        for i in range(1, len(costs)):
            if costs[i][1] < costs[best][1]:
                best = i

        if best == 0:
            self.insert_first(p)
        elif best == 1:
            self.insert_after(p, self._points[self._prev[self._ref]])
        else:
            # edge i starts at the (i - 2)-th slot of the traversal
            slots = self._slots()
            for _ in range(best - 2):
                next(slots)
            self.insert_after(p, self._points[next(slots)])
