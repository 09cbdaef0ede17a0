"""Result container returned by the sweep."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Tuple

import numpy as np

from .dcel import NIL, HalfEdgeMesh
from .geometry import Point


@dataclass
class SweepStats:
    site_events: int = 0
    circle_events: int = 0
    purged_events: int = 0
    skipped_triples: int = 0
    max_arcs: int = 0


@dataclass
class VoronoiDiagram:
    """Sites, the half-edge mesh built for them and sweep counters.

    Face ``i`` of the mesh is the cell of ``sites[i]``. Half-edges whose far
    end is unbounded keep an unset origin on that end.
    """

    sites: List[Point]
    mesh: HalfEdgeMesh
    stats: SweepStats = field(default_factory=SweepStats)

    @property
    def vertices(self) -> List[Point]:
        return [vertex.point for vertex in self.mesh.vertices]

    def vertex_array(self) -> np.ndarray:
        if not self.mesh.vertices:
            return np.zeros((0, 2), dtype=float)
        return np.array([vertex.point.as_tuple() for vertex in self.mesh.vertices], dtype=float)

    def site_array(self) -> np.ndarray:
        if not self.sites:
            return np.zeros((0, 2), dtype=float)
        return np.array([site.as_tuple() for site in self.sites], dtype=float)

    def edge_pairs(self) -> List[Tuple[int, int]]:
        return list(self.mesh.edge_pairs())

    def unbounded_halfedges(self) -> List[int]:
        """Half-edges whose origin lies at infinity."""

        return [index for index, halfedge in enumerate(self.mesh.halfedges) if halfedge.origin == NIL]

    def site_of(self, halfedge: int) -> Point:
        return self.sites[self.mesh.halfedges[halfedge].incident_face]

    def neighbors(self, face: int) -> Set[int]:
        """Faces sharing an edge with ``face``."""

        result: Set[int] = set()
        for halfedge in self.mesh.halfedges:
            if halfedge.incident_face == face:
                result.add(self.mesh.halfedges[halfedge.twin].incident_face)
        return result
