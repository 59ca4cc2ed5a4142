"""Plane geometry on points represented as complex numbers."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable


def point_less(p1: complex, p2: complex) -> bool:
    """Lexicographic order: by real part, then imaginary part."""
    return (p1.real, p1.imag) < (p2.real, p2.imag)


def point_max(p1: complex, p2: complex) -> complex:
    return p2 if point_less(p1, p2) else p1


def point_min(p1: complex, p2: complex) -> complex:
    return p1 if point_less(p1, p2) else p2


def cross(x: complex, y: complex) -> float:
    """Two-dimensional cross product."""
    return x.real * y.imag - x.imag * y.real


def quadrant(p: complex) -> int:
    """Quadrant index 0..3, counter-clockwise from the positive real axis."""
    below = p.imag < 0
    left = p.real < 0
    return (below << 1) | (left ^ below)


class Segment:
    """A closed segment from ``start`` to ``end``."""

    def __init__(self, start: complex, end: complex) -> None:
        self.start = complex(start)
        self.end = complex(end)

    def __repr__(self) -> str:
        return f"Segment({self.start!r}, {self.end!r})"

    def side(self, p: complex) -> float:
        """Negative: ``p`` lies left; zero: on the line; positive: right."""
        return cross(self.end - self.start, self.end - p)

    def sorted(self) -> Segment:
        """The same segment with its endpoints in lexicographic order."""
        if point_less(self.end, self.start):
            return Segment(self.end, self.start)
        return Segment(self.start, self.end)

    def contains(self, p: complex) -> bool:
        s, e = self.start, self.end
        return (
            cross(e - s, p - s) == 0
            and min(s.real, e.real) <= p.real <= max(s.real, e.real)
            and min(s.imag, e.imag) <= p.imag <= max(s.imag, e.imag)
        )

    def intersect(self, other: Segment) -> int:
        """0: no common point, 1: exactly one, 2: infinitely many."""
        s1, e1 = self.start, self.end
        s2, e2 = other.start, other.end
        if not self.side(s2) and not self.side(e2):
            if point_less(e1, s1):
                s1, e1 = e1, s1
            if point_less(e2, s2):
                s2, e2 = e2, s2
            lo, hi = point_max(s1, s2), point_min(e1, e2)
            if point_less(lo, hi):
                return 2
            return 1 if lo == hi else 0
        if s1 in (s2, e2) or e1 in (s2, e2):
            return 1
        cp1 = cross(e1 - s1, s2 - s1)
        cp2 = cross(e1 - s1, e2 - s1)
        cp3 = cross(e2 - s2, s1 - s2)
        cp4 = cross(e2 - s2, e1 - s2)
        if cp1 * cp2 <= 0 and cp3 * cp4 <= 0:
            return 1
        return 0


class Polygon:
    """A polygon given by its vertices in order."""

    def __init__(self, points: Iterable[complex] = ()) -> None:
        self.points = [complex(p) for p in points]

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> complex:
        return self.points[index]

    def append(self, p: complex) -> None:
        self.points.append(complex(p))

    def pop(self) -> complex:
        return self.points.pop()

    def _edges(self):
        return zip(self.points, self.points[1:] + self.points[:1])

    def double_area(self) -> float:
        """Twice the enclosed area."""
        return abs(sum(cross(a, b) for a, b in self._edges()))

    def perimeter(self) -> float:
        return sum(abs(a - b) for a, b in self._edges())

    def where(self, p: complex) -> int:
        """0: outside, 1: inside, 2: on the boundary."""
        inside = 0
        for p1, p2 in self._edges():
            if Segment(p1, p2).contains(p):
                return 2
            if p1.real <= p.real < p2.real and cross(p2 - p1, p - p1) < 0:
                inside ^= 1
            elif p2.real <= p.real < p1.real and cross(p1 - p2, p - p2) < 0:
                inside ^= 1
        return inside


def convex_hull(points: Iterable[complex]) -> Polygon:
    """Convex hull by the monotone chain, collinear boundary points dropped."""
    pts = sorted((complex(p) for p in points), key=lambda p: (p.real, p.imag))
    n = len(pts)
    if n == 0:
        raise ValueError("convex hull of no points")
    hull = Polygon([pts[0]])
    for i in range(1, 2 * n - 1):
        idx = i if i < n else 2 * n - i - 2
        while len(hull) >= 2 and cross(hull[-1] - hull[-2], pts[idx] - hull[-1]) > 0:
            hull.pop()
        if idx != 0:
            hull.append(pts[idx])
    return hull


def polar_sort(points: Iterable[complex], center: complex = 0j) -> list[complex]:
    """Points sorted counter-clockwise by angle around ``center``."""

    def compare(p1: complex, p2: complex) -> int:
        q1, q2 = quadrant(p1 - center), quadrant(p2 - center)
        if q1 != q2:
            return -1 if q1 < q2 else 1
        c = cross(p1 - center, p2 - center)
        return -1 if c > 0 else (1 if c < 0 else 0)

    return sorted((complex(p) for p in points), key=cmp_to_key(compare))