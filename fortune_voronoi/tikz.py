"""TikZ rendering of a clipped Voronoi diagram."""

from __future__ import annotations

import math
from typing import List, Optional

from .clipping import BoundingBox, clip_edges
from .diagram import VoronoiDiagram

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  vd/site radius/.store in=\vdSiteR,     vd/site radius=1.4pt,
  vd/vertex radius/.store in=\vdVertR,   vd/vertex radius=0.9pt,
  vd/line width/.store in=\vdLW,         vd/line width=0.6pt,
  site/.style={circle,fill=black,inner sep=0pt,minimum size=2*\vdSiteR},
  vertex/.style={circle,draw=black,fill=white,inner sep=0pt,minimum size=2*\vdVertR},
  edge/.style={line width=\vdLW},
  frame/.style={line width=0.4pt, dash pattern=on 2pt off 1.5pt},
}
\begin{document}
%s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("-0", ""):
        return "0"
    return formatted


def _coord(x: float, y: float) -> str:
    return f"({_format_float(x)},{_format_float(y)})"


def generate_tikz_code(
    diagram: VoronoiDiagram,
    box: Optional[BoundingBox] = None,
    *,
    scale: float = 1.0,
    draw_frame: bool = True,
    draw_vertices: bool = True,
) -> str:
    """Return a ``tikzpicture`` with the diagram's edges clipped to ``box``."""

    box = box or BoundingBox.around(diagram.sites)
    lines: List[str] = [rf"\begin{{tikzpicture}}[scale={_format_float(scale)}]"]
    if draw_frame:
        lines.append(rf"  \draw[frame] {_coord(box.xmin, box.ymin)} rectangle {_coord(box.xmax, box.ymax)};")
    for edge in clip_edges(diagram, box):
        lines.append(rf"  \draw[edge] {_coord(*edge.start)} -- {_coord(*edge.end)};")
    if draw_vertices:
        for vertex in diagram.vertices:
            if box.contains(vertex):
                lines.append(rf"  \node[vertex] at {_coord(*vertex)} {{}};")
    for idx, site in enumerate(diagram.sites):
        lines.append(rf"  \node[site] (s{idx}) at {_coord(*site)} {{}};")
    lines.append(r"\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(diagram: VoronoiDiagram, box: Optional[BoundingBox] = None, **kwargs: object) -> str:
    return standalone_tpl % generate_tikz_code(diagram, box, **kwargs)  # type: ignore[arg-type]


__all__ = ["generate_tikz_code", "generate_tikz_document"]
