import pytest

from fortune_voronoi import DuplicateSiteError, SweepOptions, get_sweep_options, set_sweep_options, voronoi


@pytest.fixture
def restore_options():
    saved = get_sweep_options()
    yield
    set_sweep_options(saved)


def test_default_options():
    options = SweepOptions()

    assert options.duplicates == "merge"
    assert options.check_invariants is False
    assert options.collinear_tolerance > 0


@pytest.mark.parametrize(
    "kwargs",
    [{"duplicates": "ignore"}, {"collinear_tolerance": -1.0}, {"order_tolerance": -1e-9}],
)
def test_invalid_options_are_rejected(kwargs):
    with pytest.raises(ValueError):
        SweepOptions(**kwargs)


def test_get_sweep_options_returns_a_copy(restore_options):
    options = get_sweep_options()
    options.duplicates = "error"

    assert get_sweep_options().duplicates == "merge"


def test_global_options_apply_when_none_are_passed(restore_options):
    set_sweep_options(SweepOptions(duplicates="error"))

    with pytest.raises(DuplicateSiteError):
        voronoi([(0, 0), (0, 0)])

    diagram = voronoi([(0, 0), (0, 0)], SweepOptions())
    assert len(diagram.sites) == 1
