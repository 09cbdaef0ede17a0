import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from fortune_voronoi import (
    BoundingBox,
    DegenerateInputError,
    Point,
    SweepOptions,
    clip_edges,
    generate_tikz_document,
    load_sites,
    random_sites,
    render_plot,
    voronoi,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_sites(args: argparse.Namespace) -> List[Point]:
    if args.path:
        logger.info("Reading sites from %s", args.path)
        return load_sites(args.path)
    logger.info("Sampling %d random site(s) with seed %s", args.random, args.seed)
    return random_sites(args.random, seed=args.seed)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a Voronoi diagram with Fortune's sweep")
    parser.add_argument("path", nargs="?", help="Text file with one 'x y' site per line")
    parser.add_argument(
        "--random",
        type=int,
        default=0,
        help="Sample this many random sites in the unit square instead of reading a file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123,
        help="Random seed used with --random (default: 123)",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=0.1,
        help="Clipping box margin as a fraction of the site extent (default: 0.1)",
    )
    parser.add_argument(
        "--duplicates",
        choices=["merge", "error"],
        default="merge",
        help="Policy for coincident sites (default: merge)",
    )
    parser.add_argument(
        "--check-invariants",
        action="store_true",
        help="Verify mesh and beachline invariants after every event",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the clipped diagram to the given path",
    )
    parser.add_argument(
        "--plot-output-path",
        help="Write a PNG plot of the clipped diagram to the given path (needs matplotlib)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not args.path and args.random <= 0:
        parser.error("either a site file or --random N is required")

    options = SweepOptions(duplicates=args.duplicates, check_invariants=args.check_invariants)
    try:
        sites = _read_sites(args)
        diagram = voronoi(sites, options)
    except (DegenerateInputError, ValueError) as exc:
        logger.error("Cannot build diagram: %s", exc)
        raise SystemExit(1)

    box = BoundingBox.around(diagram.sites, margin=args.margin)
    edges = clip_edges(diagram, box)

    print(f"Sites: {len(diagram.sites)}")
    print(f"Vertices: {len(diagram.mesh.vertices)}")
    print(f"Edges: {len(diagram.mesh.halfedges) // 2} ({len(diagram.unbounded_halfedges())} unbounded half-edge ends)")
    print(f"Circle events: {diagram.stats.circle_events} (purged {diagram.stats.purged_events})")
    print("Vertices:")
    for idx, vertex in enumerate(diagram.vertices):
        print(f"  v{idx}: ({vertex.x:.6f}, {vertex.y:.6f})")
    print(f"Clipped edges in [{box.xmin:.3f}, {box.xmax:.3f}] x [{box.ymin:.3f}, {box.ymax:.3f}]:")
    for edge in edges:
        print(
            f"  e{edge.halfedge}/{edge.twin}: ({edge.start.x:.6f}, {edge.start.y:.6f})"
            f" -> ({edge.end.x:.6f}, {edge.end.y:.6f})"
        )

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(generate_tikz_document(diagram, box), encoding="utf-8")
        print(f"TikZ document written to {output_path}")

    if args.plot_output_path:
        logger.info("Writing plot to %s", args.plot_output_path)
        written = render_plot(diagram, args.plot_output_path, box)
        print(f"Plot written to {written}")


if __name__ == "__main__":
    main(sys.argv[1:])
