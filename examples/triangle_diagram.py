"""Example pipeline: sweep three sites and print the mesh and clipped edges."""

from fortune_voronoi import BoundingBox, clip_edges, voronoi

SITES = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]


def main() -> None:
    diagram = voronoi(SITES)
    print("Vertices:", [(round(v.x, 6), round(v.y, 6)) for v in diagram.vertices])
    print("Edges:", len(diagram.edge_pairs()))
    for edge in clip_edges(diagram, BoundingBox(-2.0, -2.0, 6.0, 6.0)):
        print(
            f"e{edge.halfedge}: ({edge.start.x:.3f}, {edge.start.y:.3f}) -> ({edge.end.x:.3f}, {edge.end.y:.3f})"
        )


if __name__ == "__main__":
    main()
