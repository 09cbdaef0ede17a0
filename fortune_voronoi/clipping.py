"""Bounding-box clipping and per-site cell assembly for a swept diagram.

Both consume the mesh as left by the sweep: a half-edge has its cell on the
left, and an unset origin marks an end at infinity. An unbounded end is
resolved along the perpendicular bisector of the two cells' sites.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .dcel import NIL
from .diagram import VoronoiDiagram
from .geometry import Point

Vector = Tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        if not (self.xmin < self.xmax and self.ymin < self.ymax):
            raise ValueError(f"degenerate bounding box {self!r}")

    @classmethod
    def around(cls, points: Iterable[Point], margin: float = 0.1) -> "BoundingBox":
        """Box around ``points`` grown by ``margin`` times its largest side."""

        pts = list(points)
        if not pts:
            return cls(0.0, 0.0, 1.0, 1.0)
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        span = max(max(xs) - min(xs), max(ys) - min(ys), 1.0)
        pad = margin * span
        return cls(min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad)

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        return (
            self.xmin - tolerance <= point.x <= self.xmax + tolerance
            and self.ymin - tolerance <= point.y <= self.ymax + tolerance
        )

    def corners(self) -> List[Point]:
        """Corners in counter-clockwise order starting at the lower left."""

        return [
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        ]


@dataclass(frozen=True)
class ClippedEdge:
    """Visible part of the edge of ``halfedge``, oriented like it."""

    halfedge: int
    twin: int
    start: Point
    end: Point


def _clip_t(nq: float, np_: float, bounds: List[float]) -> bool:
    """Liang-Barsky helper narrowing the parameter interval ``bounds``."""

    if np_ == 0.0:
        # parallel to this box side; inside only if on the inner side
        return nq <= 0.0
    u = nq / np_
    if np_ > 0.0:
        if u > bounds[1]:
            return False
        if u > bounds[0]:
            bounds[0] = u
    else:
        if u < bounds[0]:
            return False
        if u < bounds[1]:
            bounds[1] = u
    return True


def clip_parametric(
    box: BoundingBox, origin: Point, direction: Vector, t0: float, t1: float
) -> Optional[Tuple[float, float]]:
    """Clip ``origin + t * direction`` for ``t`` in ``[t0, t1]`` against ``box``."""

    dx, dy = direction
    bounds = [t0, t1]
    if (
        _clip_t(box.xmin - origin.x, dx, bounds)
        and _clip_t(origin.x - box.xmax, -dx, bounds)
        and _clip_t(box.ymin - origin.y, dy, bounds)
        and _clip_t(origin.y - box.ymax, -dy, bounds)
    ):
        if bounds[0] > bounds[1]:
            return None
        return bounds[0], bounds[1]
    return None


def halfedge_direction(diagram: VoronoiDiagram, halfedge: int) -> Vector:
    """Direction of ``halfedge``: along the bisector with its cell on the left."""

    mesh = diagram.mesh
    own = diagram.sites[mesh.halfedges[halfedge].incident_face]
    other = diagram.sites[mesh.halfedges[mesh.twin(halfedge)].incident_face]
    return (own.y - other.y, other.x - own.x)


def _at(origin: Point, direction: Vector, t: float) -> Point:
    return Point(origin.x + t * direction[0], origin.y + t * direction[1])


def clip_edges(diagram: VoronoiDiagram, box: BoundingBox) -> List[ClippedEdge]:
    """Clip every edge of the diagram to ``box``; edges outside it are dropped."""

    mesh = diagram.mesh
    result: List[ClippedEdge] = []
    for edge, twin in mesh.edge_pairs():
        start = mesh.origin_point(edge)
        end = mesh.origin_point(twin)
        if start is not None and end is not None:
            origin = start
            direction = (end.x - start.x, end.y - start.y)
            t_range = (0.0, 1.0)
        elif start is not None:
            origin = start
            direction = halfedge_direction(diagram, edge)
            t_range = (0.0, math.inf)
        elif end is not None:
            origin = end
            direction = halfedge_direction(diagram, edge)
            t_range = (-math.inf, 0.0)
        else:
            own = diagram.site_of(edge)
            other = diagram.site_of(twin)
            origin = Point(0.5 * (own.x + other.x), 0.5 * (own.y + other.y))
            direction = halfedge_direction(diagram, edge)
            t_range = (-math.inf, math.inf)

        clipped = clip_parametric(box, origin, direction, *t_range)
        if clipped is None:
            continue
        t0, t1 = clipped
        result.append(ClippedEdge(edge, twin, _at(origin, direction, t0), _at(origin, direction, t1)))
    return result


def clip_polygon_halfplane(polygon: List[Point], site: Point, neighbor: Point) -> List[Point]:
    """Keep the part of ``polygon`` at least as close to ``site`` as to ``neighbor``."""

    if not polygon:
        return []
    nx = neighbor.x - site.x
    ny = neighbor.y - site.y
    mx = 0.5 * (neighbor.x + site.x)
    my = 0.5 * (neighbor.y + site.y)

    def side(p: Point) -> float:
        return (p.x - mx) * nx + (p.y - my) * ny

    output: List[Point] = []
    count = len(polygon)
    for idx in range(count):
        current = polygon[idx]
        following = polygon[(idx + 1) % count]
        s_cur = side(current)
        s_next = side(following)
        if s_cur <= 0.0:
            output.append(current)
        if (s_cur < 0.0 < s_next) or (s_next < 0.0 < s_cur):
            t = s_cur / (s_cur - s_next)
            output.append(
                Point(current.x + t * (following.x - current.x), current.y + t * (following.y - current.y))
            )
    return output


def cell_polygons(diagram: VoronoiDiagram, box: BoundingBox) -> Dict[int, List[Point]]:
    """Counter-clockwise polygon of every cell, clipped to ``box``.

    Cells that do not reach into the box map to an empty list.
    """

    mesh = diagram.mesh
    neighbors: Dict[int, set] = defaultdict(set)
    for halfedge in mesh.halfedges:
        if halfedge.incident_face == NIL:
            continue
        neighbors[halfedge.incident_face].add(mesh.halfedges[halfedge.twin].incident_face)

    cells: Dict[int, List[Point]] = {}
    for face, site in enumerate(diagram.sites):
        polygon = box.corners()
        for other in sorted(neighbors.get(face, ())):
            polygon = clip_polygon_halfplane(polygon, site, diagram.sites[other])
            if not polygon:
                break
        cells[face] = polygon
    return cells


def polygon_area(polygon: List[Point]) -> float:
    """Signed shoelace area; positive for counter-clockwise polygons."""

    total = 0.0
    for idx, current in enumerate(polygon):
        following = polygon[(idx + 1) % len(polygon)]
        total += current.x * following.y - following.x * current.y
    return 0.5 * total


__all__ = [
    "BoundingBox",
    "ClippedEdge",
    "clip_parametric",
    "halfedge_direction",
    "clip_edges",
    "clip_polygon_halfplane",
    "cell_polygons",
    "polygon_area",
]
