import logging
import types

import numpy as np
import pytest

from fortune_voronoi.geometry import Point
from fortune_voronoi.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from fortune_voronoi import voronoi


def test_safe_repr_formats_points_arrays_and_long_sequences():
    assert _safe_repr(Point(1.5, -2)) == "(1.5, -2)"
    assert _safe_repr(np.zeros((3, 2))).startswith("ndarray(shape=(3, 2), dtype=float64)")
    rendered = _safe_repr([Point(i, 0) for i in range(8)])
    assert rendered.startswith("[(0, 0), (1, 0)")
    assert rendered.endswith("... 3 more]")


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("fortune_voronoi.tests.trace")

    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "args=[2]" in message for message in messages)
    assert any(message.endswith("-> 5") for message in messages)


def test_debug_log_call_logs_and_reraises(caplog):
    logger = logging.getLogger("fortune_voronoi.tests.trace")

    @debug_log_call(logger, name="explode")
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError):
            explode()

    assert "Exception in explode" in caplog.text


def test_apply_debug_logging_wraps_module_functions_once():
    module = types.ModuleType("fake_module")

    def helper():
        return 1

    helper.__module__ = "fake_module"
    module.helper = helper
    namespace = vars(module)

    apply_debug_logging(namespace)
    wrapped = namespace["helper"]
    apply_debug_logging(namespace)

    assert getattr(wrapped, "_debug_logging_wrapped", False)
    assert namespace["helper"] is wrapped
    assert wrapped() == 1


def test_sweep_emits_debug_trace(caplog):
    with caplog.at_level(logging.DEBUG, logger="fortune_voronoi"):
        voronoi([(0, 0), (4, 0), (0, 4)])

    assert "Entering FortuneSweep.handle_circle_event" in caplog.text
    assert "Vertex 0 at (2, 2)" in caplog.text
