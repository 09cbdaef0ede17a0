"""Fortune's sweepline driver building the Voronoi half-edge mesh.

Half-edge convention: the half-edge stored on breakpoint ``(L, R)`` has the
cell of ``L`` on its left and receives its origin at the vertex where the
breakpoint stops moving. Its twin, in the cell of ``R``, starts where the
breakpoint was born; for breakpoints born at a site event that end is unset
until the opposite breakpoint finishes, and it stays unset for edges that
reach infinity.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence

from .beachline import Beachline
from .config import SweepOptions, get_sweep_options
from .dcel import Face, HalfEdgeMesh, Vertex
from .diagram import SweepStats, VoronoiDiagram
from .errors import CollinearSitesError, InvariantViolation
from .events import CircleEvent, Event, EventQueue, SiteEvent
from .geometry import Point, Triple, breakpoints_converge
from .logging_utils import apply_debug_logging
from .sites import prepare_sites

logger = logging.getLogger(__name__)


class FortuneSweep:
    """Owns the beachline, the event queue and the mesh for one construction."""

    def __init__(self, sites: Sequence[Point], options: Optional[SweepOptions] = None):
        self.options = options or get_sweep_options()
        self.sites = list(sites)
        self.mesh = HalfEdgeMesh()
        self.beachline = Beachline()
        self.queue = EventQueue()
        self.stats = SweepStats()
        self.sweep_y = math.inf
        self.arc_count = 0
        for face, site in enumerate(self.sites):
            self.mesh.faces.append(Face(site))
            self.queue.push(SiteEvent(site, face))

    def done(self) -> bool:
        return self.queue.is_empty()

    def step(self) -> Event:
        """Process the next event and return it."""

        event = self.queue.pop()
        # A circle bottom can round to just above the event that created it.
        self.sweep_y = min(self.sweep_y, event.y)
        logger.debug("Popped %s at sweep y=%.9g", type(event).__name__, event.y)
        if isinstance(event, SiteEvent):
            self.handle_site_event(event)
        else:
            self.handle_circle_event(event)
        self.stats.max_arcs = max(self.stats.max_arcs, self.arc_count)
        if self.options.check_invariants:
            self.check_invariants()
        return event

    def run(self) -> VoronoiDiagram:
        while not self.done():
            self.step()
        return VoronoiDiagram(sites=self.sites, mesh=self.mesh, stats=self.stats)

    def check_invariants(self) -> None:
        self.mesh.check_twins()
        self.mesh.check_links()
        self.beachline.check_structure()
        if not self.beachline.is_empty():
            self.beachline.check_order(self.sweep_y, self.options.order_tolerance)

    # -- event handlers -------------------------------------------------

    def handle_site_event(self, event: SiteEvent) -> None:
        self.stats.site_events += 1
        site = event.site
        if self.beachline.is_empty():
            self.beachline.insert_first(site, event.face)
            self.arc_count = 1
            return

        arc = self.beachline.locate_arc_above(site)
        self._discard_circle_event(arc)
        above = self.beachline.arc(arc)
        first, second = self.mesh.add_twins()

        if above.site.y == site.y:
            # Both sites sit on the sweep line: one breakpoint, upward end at infinity.
            if site.x >= above.site.x:
                left_face, right_face = above.face, event.face
            else:
                left_face, right_face = event.face, above.face
            self.mesh.halfedges[first].incident_face = left_face
            self.mesh.halfedges[second].incident_face = right_face
            new_arc = self.beachline.split_level(arc, site, event.face, first)
            self.arc_count += 1
        else:
            self.mesh.halfedges[first].incident_face = above.face
            self.mesh.halfedges[second].incident_face = event.face
            new_arc = self.beachline.split_arc(arc, site, event.face, first, second)
            self.arc_count += 2

        self._check_triple(self.beachline.left_arc(new_arc), self.beachline.leftward_triple(new_arc))
        self._check_triple(self.beachline.right_arc(new_arc), self.beachline.rightward_triple(new_arc))

    def handle_circle_event(self, event: CircleEvent) -> None:
        self.stats.circle_events += 1
        leaf = event.arc
        left = self.beachline.left_arc(leaf)
        right = self.beachline.right_arc(leaf)
        if left is None or right is None:
            raise InvariantViolation(
                "inner-arc", "disappearing arc lacks a neighbour", {"arc": leaf, "left": left, "right": right}
            )

        # delete_leaf retires one of the two breakpoints, so read their edges first.
        pred_edge = self.beachline.breakpoint(self.beachline.successor(left)).halfedge  # type: ignore[arg-type]
        succ_edge = self.beachline.breakpoint(self.beachline.predecessor(right)).halfedge  # type: ignore[arg-type]
        _, _, parent, other = self.beachline.delete_leaf(leaf)
        self.arc_count -= 1
        self.stats.purged_events += self.queue.remove_circles_with_leaf(leaf)
        # The neighbours' triples included the removed arc.
        self._discard_circle_event(left)
        self._discard_circle_event(right)

        mesh = self.mesh
        halfedges = mesh.halfedges
        inward, outward = mesh.add_twins()
        halfedges[inward].incident_face = self.beachline.arc(left).face
        halfedges[outward].incident_face = self.beachline.arc(right).face

        vertex = len(mesh.vertices)
        mesh.vertices.append(Vertex(event.center, incident_edge=outward))

        halfedges[pred_edge].origin = vertex
        halfedges[succ_edge].origin = vertex
        halfedges[outward].origin = vertex

        self._link(mesh.twin(pred_edge), succ_edge)
        self._link(mesh.twin(succ_edge), outward)
        self._link(inward, pred_edge)

        self.beachline.breakpoint(other).halfedge = inward
        logger.debug(
            "Vertex %d at (%.9g, %.9g) closes arc %d (parent %d retired)",
            vertex,
            event.center.x,
            event.center.y,
            leaf,
            parent,
        )

        self._check_triple(left, self.beachline.leftward_triple(right))
        self._check_triple(right, self.beachline.rightward_triple(left))

    # -- helpers --------------------------------------------------------

    def _link(self, edge: int, following: int) -> None:
        self.mesh.halfedges[edge].next = following
        self.mesh.halfedges[following].prev = edge

    def _discard_circle_event(self, arc: int) -> None:
        removed = self.queue.remove_circles_with_leaf(arc)
        self.stats.purged_events += removed
        self.beachline.arc(arc).circle_event = None

    def _check_triple(self, arc: Optional[int], triple: Optional[Triple]) -> None:
        """Queue a circle event for the middle arc ``arc`` if ``triple`` converges."""

        if arc is None or triple is None:
            return
        tolerance = self.options.collinear_tolerance
        if not breakpoints_converge(*triple, tolerance=tolerance):
            return
        try:
            event = CircleEvent.from_triple(arc, triple, tolerance)
        except CollinearSitesError:
            self.stats.skipped_triples += 1
            logger.debug("Skipping collinear triple %s for arc %d", triple, arc)
            return
        self.beachline.arc(arc).circle_event = self.queue.push(event)


def voronoi(points: Iterable[object], options: Optional[SweepOptions] = None) -> VoronoiDiagram:
    """Build the Voronoi half-edge mesh of ``points``.

    ``points`` may hold :class:`Point` objects, ``(x, y)`` pairs or be an
    ``(n, 2)`` numpy array. Face ``i`` of the result belongs to ``sites[i]``
    of the returned diagram, which is the input after the duplicate policy.
    """

    options = options or get_sweep_options()
    sites = prepare_sites(points, duplicates=options.duplicates)
    logger.info("Computing Voronoi diagram for %d site(s)", len(sites))
    diagram = FortuneSweep(sites, options).run()
    logger.info(
        "Finished: %d vertices, %d edges, %d circle event(s), %d purged",
        len(diagram.mesh.vertices),
        len(diagram.mesh.halfedges) // 2,
        diagram.stats.circle_events,
        diagram.stats.purged_events,
    )
    return diagram


apply_debug_logging(globals(), logger=logger, skip={"FortuneSweep._link", "FortuneSweep.done"})
