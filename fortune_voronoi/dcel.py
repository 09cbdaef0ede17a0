"""Half-edge mesh (doubly connected edge list) with index handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import InvariantViolation
from .geometry import Point

#: Handle value for a field that has not been assigned yet.
NIL = -1


@dataclass
class Vertex:
    point: Point
    incident_edge: int = NIL


@dataclass
class HalfEdge:
    origin: int = NIL
    twin: int = NIL
    incident_face: int = NIL
    next: int = NIL
    prev: int = NIL


@dataclass
class Face:
    """Voronoi cell of ``site``; ``outer_component`` is set by face assembly."""

    site: Point
    outer_component: Optional[int] = None


@dataclass
class HalfEdgeMesh:
    """Arenas of vertices, half-edges and faces.

    The only mutator is :meth:`add_twins`. Origins, faces and next/prev links
    are assigned by the sweep directly on the arena slots; the mesh itself only
    guarantees that half-edges are born in twinned pairs.
    """

    vertices: List[Vertex] = field(default_factory=list)
    halfedges: List[HalfEdge] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)

    def add_twins(self) -> Tuple[int, int]:
        first = len(self.halfedges)
        self.halfedges.append(HalfEdge(twin=first + 1))
        self.halfedges.append(HalfEdge(twin=first))
        return first, first + 1

    def twin(self, edge: int) -> int:
        return self.halfedges[edge].twin

    def origin_point(self, edge: int) -> Optional[Point]:
        origin = self.halfedges[edge].origin
        if origin == NIL:
            return None
        return self.vertices[origin].point

    def destination_point(self, edge: int) -> Optional[Point]:
        return self.origin_point(self.twin(edge))

    def is_bounded(self, edge: int) -> bool:
        return self.halfedges[edge].origin != NIL and self.halfedges[self.twin(edge)].origin != NIL

    def edge_pairs(self) -> Iterator[Tuple[int, int]]:
        """Yield each undirected edge once as ``(edge, twin)`` with ``edge < twin``."""

        for index, halfedge in enumerate(self.halfedges):
            if index < halfedge.twin:
                yield index, halfedge.twin

    def face_halfedges(self, face: int) -> List[int]:
        return [index for index, halfedge in enumerate(self.halfedges) if halfedge.incident_face == face]

    def check_twins(self) -> None:
        """Raise :class:`InvariantViolation` unless ``twin`` is an involution."""

        count = len(self.halfedges)
        for index, halfedge in enumerate(self.halfedges):
            twin = halfedge.twin
            if twin == index or not 0 <= twin < count or self.halfedges[twin].twin != index:
                raise InvariantViolation(
                    "twin-involution",
                    "half-edge twin link is not mutual",
                    {"halfedge": index, "twin": twin},
                )

    def check_links(self) -> None:
        """Raise :class:`InvariantViolation` when an assigned next/prev is not mutual."""

        for index, halfedge in enumerate(self.halfedges):
            if halfedge.next != NIL and self.halfedges[halfedge.next].prev != index:
                raise InvariantViolation(
                    "next-prev",
                    "next link without matching prev",
                    {"halfedge": index, "next": halfedge.next},
                )
            if halfedge.prev != NIL and self.halfedges[halfedge.prev].next != index:
                raise InvariantViolation(
                    "next-prev",
                    "prev link without matching next",
                    {"halfedge": index, "prev": halfedge.prev},
                )


__all__ = ["NIL", "Vertex", "HalfEdge", "Face", "HalfEdgeMesh"]
