import math

import pytest

from fortune_voronoi import voronoi
from fortune_voronoi.clipping import (
    BoundingBox,
    cell_polygons,
    clip_edges,
    clip_parametric,
    clip_polygon_halfplane,
    halfedge_direction,
    polygon_area,
)
from fortune_voronoi.geometry import Point, orientation
from fortune_voronoi.sites import random_sites


def _close(p, q, tol=1e-9):
    return math.isclose(p.x, q.x, abs_tol=tol) and math.isclose(p.y, q.y, abs_tol=tol)


def test_bounding_box_validates_and_grows_around_points():
    with pytest.raises(ValueError):
        BoundingBox(0, 0, 0, 1)

    box = BoundingBox.around([Point(0, 0), Point(4, 2)], margin=0.25)

    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (-1.0, -1.0, 5.0, 3.0)
    assert box.contains(Point(5, 3))
    assert not box.contains(Point(5.1, 0))
    assert BoundingBox.around([]) == BoundingBox(0.0, 0.0, 1.0, 1.0)
    assert polygon_area(box.corners()) == pytest.approx(24.0)


def test_clip_parametric_handles_segments_rays_and_misses():
    box = BoundingBox(0, 0, 10, 10)

    assert clip_parametric(box, Point(-5, 5), (1.0, 0.0), 0.0, 100.0) == (5.0, 15.0)
    assert clip_parametric(box, Point(5, 5), (0.0, 1.0), -math.inf, math.inf) == (-5.0, 5.0)
    assert clip_parametric(box, Point(5, 5), (1.0, 1.0), 0.0, math.inf) == (0.0, 5.0)
    assert clip_parametric(box, Point(-5, 20), (1.0, 0.0), 0.0, 100.0) is None
    assert clip_parametric(box, Point(-5, 5), (-1.0, 0.0), 0.0, math.inf) is None


def test_two_site_bisector_is_clipped_as_a_full_line():
    diagram = voronoi([(0, 0), (4, 0)])
    box = BoundingBox(-1, -1, 5, 5)

    (edge,) = clip_edges(diagram, box)

    assert halfedge_direction(diagram, edge.halfedge) == (0.0, 4.0)
    assert _close(edge.start, Point(2, -1))
    assert _close(edge.end, Point(2, 5))


def test_triangle_edges_are_rays_from_the_vertex():
    diagram = voronoi([(0, 0), (4, 0), (0, 4)])
    box = BoundingBox(-2, -2, 6, 6)

    edges = clip_edges(diagram, box)

    assert len(edges) == 3
    far_ends = []
    for edge in edges:
        if _close(edge.start, Point(2, 2)):
            far_ends.append(edge.end)
        else:
            assert _close(edge.end, Point(2, 2))
            far_ends.append(edge.start)
        site = diagram.site_of(edge.halfedge)
        assert orientation(edge.start, edge.end, site) > 0
    assert sorted((round(p.x, 9), round(p.y, 9)) for p in far_ends) == [(-2.0, 2.0), (2.0, -2.0), (6.0, 6.0)]


def test_edges_outside_the_box_are_dropped():
    diagram = voronoi([(0, 0), (4, 0)])

    assert clip_edges(diagram, BoundingBox(10, 10, 20, 20)) == []


def test_halfplane_clip_keeps_the_near_side():
    square = BoundingBox(-1, -1, 5, 5).corners()

    kept = clip_polygon_halfplane(square, Point(0, 0), Point(4, 0))

    assert len(kept) == 4
    assert polygon_area(kept) == pytest.approx(18.0)
    assert all(p.x <= 2.0 + 1e-12 for p in kept)
    assert clip_polygon_halfplane([], Point(0, 0), Point(1, 0)) == []


def test_triangle_cells_partition_the_box():
    diagram = voronoi([(0, 0), (4, 0), (0, 4)])
    box = BoundingBox(-2, -2, 6, 6)

    cells = cell_polygons(diagram, box)

    assert set(cells) == {0, 1, 2}
    assert polygon_area(cells[0]) == pytest.approx(16.0)
    assert sum(polygon_area(cell) for cell in cells.values()) == pytest.approx(64.0)


def test_random_cells_partition_the_box_and_contain_their_sites():
    diagram = voronoi(random_sites(40, seed=5))
    box = BoundingBox.around(diagram.sites, margin=0.2)

    cells = cell_polygons(diagram, box)

    total = sum(polygon_area(cell) for cell in cells.values())
    assert total == pytest.approx((box.xmax - box.xmin) * (box.ymax - box.ymin), rel=1e-9)
    for face, polygon in cells.items():
        assert polygon_area(polygon) > 0.0
        site = diagram.sites[face]
        count = len(polygon)
        for idx in range(count):
            assert orientation(polygon[idx], polygon[(idx + 1) % count], site) >= -1e-12
