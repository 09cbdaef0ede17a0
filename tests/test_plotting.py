import pytest

from fortune_voronoi import BoundingBox, render_plot, voronoi

pytest.importorskip("matplotlib")


def test_render_plot_writes_png(tmp_path):
    diagram = voronoi([(0, 0), (4, 0), (0, 4), (3, 3)])
    target = tmp_path / "plots" / "diagram.png"

    written = render_plot(diagram, target, BoundingBox(-2, -2, 6, 6), title="four sites")

    assert written == target
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
