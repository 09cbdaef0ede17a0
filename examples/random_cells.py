"""Example pipeline: random sites, clipped cells and a rendered plot."""

from fortune_voronoi import BoundingBox, cell_polygons, polygon_area, random_sites, render_plot, voronoi


def main() -> None:
    diagram = voronoi(random_sites(50, seed=123))
    box = BoundingBox(0.0, 0.0, 1.0, 1.0)
    cells = cell_polygons(diagram, box)
    areas = sorted(polygon_area(cell) for cell in cells.values())
    print("Sites:", len(diagram.sites))
    print("Circle events:", diagram.stats.circle_events, "purged:", diagram.stats.purged_events)
    print(f"Smallest cell: {areas[0]:.5f}, largest cell: {areas[-1]:.5f}, total: {sum(areas):.5f}")
    print("Plot written to", render_plot(diagram, "random_cells.png", box, title="50 random sites"))


if __name__ == "__main__":
    main()
