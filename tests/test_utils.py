"""Tests for helpers: diag, grad/value and graph inspection."""

import numpy as np
import pytest

from vecgrad import GradVec, diag, grad, graph_summary, print_graph_summary, value
from vecgrad.core.graph_utils import depth, walk


def test_diag():
    m = diag(3, 2.5)
    np.testing.assert_array_equal(m, [[2.5, 0, 0], [0, 2.5, 0], [0, 0, 2.5]])
    assert diag(0, 1.0).shape == (0, 0)
    with pytest.raises(ValueError):
        diag(-1, 1.0)


def test_diag_dtype():
    assert diag(2, 1).dtype.kind == "i"
    assert diag(2, 1, dtype=np.float32).dtype == np.float32


def test_grad_helper():
    np.testing.assert_allclose(grad(lambda x: x * x, [1.0, 3.0]), [2.0, 6.0])
    with pytest.raises(TypeError):
        grad(lambda x: 1.0, [1.0])


def test_value_helper():
    a = GradVec([1.0])
    assert value(a) is a.values
    assert value(2.0) == 2.0


def test_graph_summary_counts_shared_nodes_once():
    a = GradVec([1.0, 2.0])
    c = (a * a).abs()
    stats = graph_summary(c)
    assert stats["nodes"] == 3
    assert stats["edges"] == 3
    assert stats["depth"] == 2
    assert stats["ops"] == {"abs": 1, "mul": 1, "leaf": 1}
    assert [n.op_tag for n in walk(c)] == ["abs", "mul", "leaf"]


def test_depth_of_leaf_and_function_nodes():
    a = GradVec([0.5])
    assert depth(a) == 0
    assert depth(a.sin().exp()) == 2


def test_print_graph_summary(capsys):
    a = GradVec([1.0])
    b = GradVec([2.0])
    stats = print_graph_summary(a + b)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "add" in out
    assert stats["nodes"] == 3
