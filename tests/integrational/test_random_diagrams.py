from __future__ import annotations

from typing import Set, Tuple

import numpy as np
import pytest

from fortune_voronoi import SweepOptions, voronoi
from fortune_voronoi.sites import random_sites

spatial = pytest.importorskip("scipy.spatial")

CASES = [
    (8, 1),
    (25, 2),
    (50, 123),
    (120, 2024),
]


def _ridge_pairs(diagram) -> Set[Tuple[int, int]]:
    mesh = diagram.mesh
    pairs = set()
    for edge, twin in mesh.edge_pairs():
        a = mesh.halfedges[edge].incident_face
        b = mesh.halfedges[twin].incident_face
        pairs.add((min(a, b), max(a, b)))
    return pairs


@pytest.mark.parametrize("count, seed", CASES)
def test_vertices_match_qhull(count: int, seed: int) -> None:
    sites = random_sites(count, seed=seed)
    diagram = voronoi(sites, SweepOptions(check_invariants=True))

    reference = spatial.Voronoi(diagram.site_array())
    ours = diagram.vertex_array()

    assert ours.shape == reference.vertices.shape
    tree = spatial.cKDTree(reference.vertices)
    distances, _ = tree.query(ours)
    scale = np.maximum(1.0, np.abs(ours).max(axis=1))
    assert np.all(distances <= 1e-6 * scale)


@pytest.mark.parametrize("count, seed", CASES)
def test_cell_adjacency_matches_qhull(count: int, seed: int) -> None:
    sites = random_sites(count, seed=seed)
    diagram = voronoi(sites)

    reference = spatial.Voronoi(diagram.site_array())
    expected = {(int(min(a, b)), int(max(a, b))) for a, b in reference.ridge_points}

    assert _ridge_pairs(diagram) == expected


@pytest.mark.parametrize("count, seed", CASES)
def test_vertex_circles_are_empty(count: int, seed: int) -> None:
    diagram = voronoi(random_sites(count, seed=seed))
    sites = diagram.site_array()

    for vertex in diagram.mesh.vertices:
        point = np.array(vertex.point.as_tuple())
        distances = np.hypot(*(sites - point).T)
        nearest = np.sort(distances)
        # three sites on the circle, none strictly inside
        assert nearest[2] - nearest[0] <= 1e-7 * max(1.0, nearest[0])
