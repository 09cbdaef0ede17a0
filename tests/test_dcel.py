import pytest

from fortune_voronoi.dcel import NIL, HalfEdgeMesh, Vertex
from fortune_voronoi.errors import InvariantViolation
from fortune_voronoi.geometry import Point


def test_add_twins_creates_mutual_pair_with_unset_fields():
    mesh = HalfEdgeMesh()

    first, second = mesh.add_twins()
    third, fourth = mesh.add_twins()

    assert (first, second, third, fourth) == (0, 1, 2, 3)
    for edge in range(4):
        assert mesh.twin(mesh.twin(edge)) == edge
        halfedge = mesh.halfedges[edge]
        assert halfedge.origin == NIL
        assert halfedge.incident_face == NIL
        assert halfedge.next == NIL and halfedge.prev == NIL
    mesh.check_twins()
    assert list(mesh.edge_pairs()) == [(0, 1), (2, 3)]


def test_origin_queries_and_boundedness():
    mesh = HalfEdgeMesh()
    first, second = mesh.add_twins()
    mesh.vertices.append(Vertex(Point(1, 2), incident_edge=first))
    mesh.halfedges[first].origin = 0

    assert mesh.origin_point(first) == Point(1, 2)
    assert mesh.origin_point(second) is None
    assert mesh.destination_point(second) == Point(1, 2)
    assert not mesh.is_bounded(first)

    mesh.vertices.append(Vertex(Point(3, 4), incident_edge=second))
    mesh.halfedges[second].origin = 1
    assert mesh.is_bounded(first) and mesh.is_bounded(second)


def test_face_halfedges_filters_by_incident_face():
    mesh = HalfEdgeMesh()
    first, second = mesh.add_twins()
    mesh.halfedges[first].incident_face = 0
    mesh.halfedges[second].incident_face = 1

    assert mesh.face_halfedges(0) == [first]
    assert mesh.face_halfedges(1) == [second]
    assert mesh.face_halfedges(2) == []


def test_check_twins_reports_broken_involution():
    mesh = HalfEdgeMesh()
    mesh.add_twins()
    mesh.add_twins()
    mesh.halfedges[1].twin = 2

    with pytest.raises(InvariantViolation) as excinfo:
        mesh.check_twins()

    assert excinfo.value.invariant == "twin-involution"
    assert "halfedge=0, twin=1" in str(excinfo.value)


def test_check_links_requires_mutual_next_and_prev():
    mesh = HalfEdgeMesh()
    mesh.add_twins()
    mesh.add_twins()
    mesh.halfedges[0].next = 2
    mesh.halfedges[2].prev = 0
    mesh.check_links()

    mesh.halfedges[2].prev = 3
    with pytest.raises(InvariantViolation):
        mesh.check_links()
