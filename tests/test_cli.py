import pytest

import fortune_voronoi.__main__ as cli


def _write_sites(tmp_path, text="0 0\n4 0\n0 4\n"):
    path = tmp_path / "sites.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_main_prints_summary_and_writes_tikz_document(tmp_path, capsys):
    sites_path = _write_sites(tmp_path)
    tikz_path = tmp_path / "out" / "diagram.tex"

    cli.main([str(sites_path), "--tikz-output-path", str(tikz_path)])

    output = capsys.readouterr().out
    assert "Sites: 3" in output
    assert "Vertices: 1" in output
    assert "v0: (2.000000, 2.000000)" in output
    assert "Circle events: 1" in output
    document = tikz_path.read_text(encoding="utf-8")
    assert "\\begin{tikzpicture}" in document
    assert "\\node[vertex] at (2,2) {};" in document


def test_main_passes_plot_path_to_renderer(tmp_path, monkeypatch, capsys):
    sites_path = _write_sites(tmp_path)
    plot_path = tmp_path / "plot.png"
    calls = []

    def _render(diagram, path, box):
        calls.append((len(diagram.sites), path, box))
        return path

    monkeypatch.setattr(cli, "render_plot", _render)

    cli.main([str(sites_path), "--plot-output-path", str(plot_path), "--margin", "0.5"])

    assert len(calls) == 1
    count, path, box = calls[0]
    assert count == 3
    assert path == str(plot_path)
    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (-2.0, -2.0, 6.0, 6.0)
    assert f"Plot written to {plot_path}" in capsys.readouterr().out


def test_main_samples_random_sites(capsys):
    cli.main(["--random", "12", "--seed", "5", "--check-invariants", "--log-level", "WARNING"])

    assert "Sites: 12" in capsys.readouterr().out


def test_main_requires_a_site_source():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_main_exits_with_error_on_rejected_duplicates(tmp_path, caplog):
    sites_path = _write_sites(tmp_path, "0 0\n1 1\n0 0\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(sites_path), "--duplicates", "error"])

    assert excinfo.value.code == 1
    assert "Cannot build diagram" in caplog.text


def test_main_exits_with_error_on_malformed_file(tmp_path, caplog):
    sites_path = _write_sites(tmp_path, "0 0\nnot a site\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(sites_path)])

    assert excinfo.value.code == 1
    assert "[line 2]" in caplog.text
