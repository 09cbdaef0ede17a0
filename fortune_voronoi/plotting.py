"""matplotlib rendering of a clipped Voronoi diagram."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .clipping import BoundingBox, cell_polygons, clip_edges
from .diagram import VoronoiDiagram


def render_plot(
    diagram: VoronoiDiagram,
    path: Union[str, Path],
    box: Optional[BoundingBox] = None,
    *,
    title: Optional[str] = None,
    fill_cells: bool = True,
) -> Path:
    """Write a PNG of the diagram to ``path`` and return the path."""

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    box = box or BoundingBox.around(diagram.sites)
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(5, 5))
    if fill_cells:
        cmap = plt.get_cmap("tab20")
        for face, polygon in cell_polygons(diagram, box).items():
            if len(polygon) < 3:
                continue
            ax.fill(
                [p.x for p in polygon],
                [p.y for p in polygon],
                color=cmap(face % 20),
                alpha=0.35,
                linewidth=0,
            )
    for edge in clip_edges(diagram, box):
        ax.plot([edge.start.x, edge.end.x], [edge.start.y, edge.end.y], color="black", linewidth=0.8)
    vertices = [v for v in diagram.vertices if box.contains(v)]
    if vertices:
        ax.scatter([v.x for v in vertices], [v.y for v in vertices], c="white", edgecolors="black", s=12, zorder=3)
    if diagram.sites:
        ax.scatter([s.x for s in diagram.sites], [s.y for s in diagram.sites], c="#1f77b4", s=14, zorder=4)

    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(box.xmin, box.xmax)
    ax.set_ylim(box.ymin, box.ymax)
    if title:
        ax.set_title(title)
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)
    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)
    return output


__all__ = ["render_plot"]
