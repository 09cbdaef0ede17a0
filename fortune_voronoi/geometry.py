"""Planar primitives and the predicates used by the sweep.

The sweep line moves downward, so a site lies on or above it and every
parabola ``y = ((x - sx)**2 + sy**2 - l**2) / (2 * (sy - l))`` opens upward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, Tuple

from .errors import CollinearSitesError

Triple = Tuple["Point", "Point", "Point"]


def _order_key(value: float) -> Tuple[int, float]:
    # NaN compares equal to itself and greater than every other float.
    if math.isnan(value):
        return (1, 0.0)
    return (0, value)


@total_ordering
@dataclass(frozen=True, eq=False)
class Point:
    """Immutable 2D point ordered by x, then y."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def _key(self) -> Tuple[Tuple[int, float], Tuple[int, float]]:
        return (_order_key(self.x), _order_key(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def breakpoint_x(left: Point, right: Point, sweep_y: float) -> float:
    """Return the abscissa where the parabolas of ``left`` and ``right`` meet.

    Of the two intersections, the one with ``left``'s arc on its left is
    returned. A site on the sweep line contributes a vertical ray at its own
    x, which is the limiting value of the general formula.
    """

    dl = left.y - sweep_y
    dr = right.y - sweep_y
    if dl == 0.0 and dr == 0.0:
        return 0.5 * (left.x + right.x)
    if dl == 0.0:
        return left.x
    if dr == 0.0:
        return right.x
    if left.y == right.y:
        return 0.5 * (left.x + right.x)

    # f(u) = y_left - y_right in coordinates relative to left.x; the crossing
    # where f goes from negative to positive is (-b + sqrt(disc)) / (2a).
    w = right.x - left.x
    a = (right.y - left.y) / (2.0 * dl * dr)
    b = w / dr
    c = -w * w / (2.0 * dr) + 0.5 * (left.y - right.y)
    disc = math.sqrt(max(b * b - 4.0 * a * c, 0.0))
    if b > 0.0:
        u = 2.0 * c / (-b - disc)
    else:
        u = (-b + disc) / (2.0 * a)
    return left.x + u


def orientation(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of ``a, b, c``; negative for a clockwise turn."""

    return (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x)


def breakpoints_converge(a: Point, b: Point, c: Point, tolerance: float = 0.0) -> bool:
    """Return ``True`` when the breakpoints around the middle arc ``b`` meet.

    For a downward sweep this is a clockwise turn ``a -> b -> c``. A non-zero
    ``tolerance`` treats turns whose sine is within it of zero as collinear.
    """

    cross = orientation(a, b, c)
    if tolerance <= 0.0:
        return cross < 0.0
    scale = a.distance_to(b) * b.distance_to(c)
    return cross < -tolerance * scale


def circumcenter(p1: Point, p2: Point, p3: Point, tolerance: float = 1e-12) -> Point:
    bx, by = p2.x - p1.x, p2.y - p1.y
    cx, cy = p3.x - p1.x, p3.y - p1.y
    cross = bx * cy - by * cx
    scale = math.hypot(bx, by) * math.hypot(cx, cy)
    if scale == 0.0 or abs(cross) <= tolerance * scale:
        raise CollinearSitesError((p1, p2, p3))

    d = 2.0 * cross
    b_sq = bx * bx + by * by
    c_sq = cx * cx + cy * cy
    ux = (cy * b_sq - by * c_sq) / d
    uy = (bx * c_sq - cx * b_sq) / d
    return Point(p1.x + ux, p1.y + uy)


def circumcircle_bottom(p1: Point, p2: Point, p3: Point, tolerance: float = 1e-12) -> float:
    """Height at which the sweep line touches the circle through the points."""

    center = circumcenter(p1, p2, p3, tolerance)
    return center.y - center.distance_to(p1)


__all__ = [
    "Point",
    "Triple",
    "breakpoint_x",
    "orientation",
    "breakpoints_converge",
    "circumcenter",
    "circumcircle_bottom",
]
