from .geometry import Point, breakpoint_x, circumcenter, circumcircle_bottom, breakpoints_converge, orientation
from .dcel import NIL, Vertex, HalfEdge, Face, HalfEdgeMesh
from .beachline import Arc, Breakpoint, BeachNode, Beachline
from .events import SiteEvent, CircleEvent, EventQueue
from .diagram import VoronoiDiagram, SweepStats
from .sweep import FortuneSweep, voronoi
from .sites import as_points, prepare_sites, random_sites, load_sites
from .clipping import BoundingBox, ClippedEdge, clip_edges, cell_polygons, polygon_area
from .tikz import generate_tikz_code, generate_tikz_document
from .plotting import render_plot
from .config import SweepOptions, get_sweep_options, set_sweep_options
from .errors import (
    InvariantViolation,
    DegenerateInputError,
    CollinearSitesError,
    InvalidSiteError,
    DuplicateSiteError,
)

__all__ = [
    'Point',
    'breakpoint_x',
    'circumcenter',
    'circumcircle_bottom',
    'breakpoints_converge',
    'orientation',
    'NIL',
    'Vertex',
    'HalfEdge',
    'Face',
    'HalfEdgeMesh',
    'Arc',
    'Breakpoint',
    'BeachNode',
    'Beachline',
    'SiteEvent',
    'CircleEvent',
    'EventQueue',
    'VoronoiDiagram',
    'SweepStats',
    'FortuneSweep',
    'voronoi',
    'as_points',
    'prepare_sites',
    'random_sites',
    'load_sites',
    'BoundingBox',
    'ClippedEdge',
    'clip_edges',
    'cell_polygons',
    'polygon_area',
    'generate_tikz_code',
    'generate_tikz_document',
    'render_plot',
    'SweepOptions',
    'get_sweep_options',
    'set_sweep_options',
    'InvariantViolation',
    'DegenerateInputError',
    'CollinearSitesError',
    'InvalidSiteError',
    'DuplicateSiteError',
]
