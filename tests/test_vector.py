"""Unit tests for GradVec construction, gradient queries and mutation."""

import numpy as np
import pytest
from hypothesis import given, strategies as st

from vecgrad import GradVec, LengthMismatchError, Leaf, evaluate, precision_context

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


class TestConstruction:

    def test_from_sequence_is_leaf(self):
        a = GradVec([1, 2, 3])
        assert isinstance(a.node, Leaf)
        assert a.values.dtype == np.float64
        assert len(a) == 3
        assert list(a) == [1.0, 2.0, 3.0]

    def test_from_generator(self):
        a = GradVec.from_sequence(float(i) for i in range(4))
        np.testing.assert_array_equal(a.values, [0.0, 1.0, 2.0, 3.0])

    def test_explicit_dtype(self):
        a = GradVec([1, 2], dtype=np.int64)
        assert a.values.dtype == np.int64

    def test_scalar_rejected(self):
        with pytest.raises(TypeError):
            GradVec(3.0)

    def test_nested_rejected(self):
        with pytest.raises(ValueError):
            GradVec([[1.0, 2.0], [3.0, 4.0]])

    def test_from_scalar(self):
        a = GradVec([1.0, 2.0, 3.0])
        c = GradVec.from_scalar(a, 0.5)
        np.testing.assert_array_equal(c.values, [0.5, 0.5, 0.5])
        assert isinstance(c.node, Leaf)
        assert c.node is not a.node

    def test_precision_context(self):
        with precision_context("float32"):
            a = GradVec([1.0, 2.0])
        b = GradVec([1.0, 2.0])
        assert a.values.dtype == np.float32
        assert b.values.dtype == np.float64

    def test_unknown_precision(self):
        with pytest.raises(ValueError):
            with precision_context("float8"):
                pass

    def test_data_is_a_copy(self):
        a = GradVec([1.0, 2.0])
        d = a.data
        d[0] = 99.0
        assert a.values[0] == 1.0


class TestGradientRules:

    @given(st.lists(finite, min_size=1, max_size=8))
    def test_identity(self, xs):
        v = GradVec(xs)
        np.testing.assert_array_equal(v.evaluate_grad(v), np.ones(len(xs)))

    @given(st.lists(finite, min_size=1, max_size=8))
    def test_independence(self, xs):
        a = GradVec(xs)
        b = GradVec(xs)
        np.testing.assert_array_equal(a.evaluate_grad(b), np.zeros(len(xs)))

    def test_length_mismatch_on_query(self):
        a = GradVec([1.0, 2.0])
        b = GradVec([1.0, 2.0, 3.0])
        with pytest.raises(LengthMismatchError):
            a.evaluate_grad(b)


class TestMutate:

    def test_mutate_replaces_in_place_and_detaches(self):
        a = GradVec([1.0, 2.0])
        buf = a.values
        old = a.node
        b = a * 2.0
        np.testing.assert_array_equal(b.evaluate_grad(a), [2.0, 2.0])

        a.mutate([5.0, 6.0])
        assert a.values is buf
        np.testing.assert_array_equal(a.values, [5.0, 6.0])
        assert a.node is not old
        assert isinstance(a.node, Leaf)
        # b's graph no longer contains a's current node
        np.testing.assert_array_equal(b.evaluate_grad(a), [0.0, 0.0])
        # but still answers queries against the old node object
        np.testing.assert_array_equal(evaluate(b.node, old, a.values), [2.0, 2.0])

    def test_mutate_length_mismatch_changes_nothing(self):
        a = GradVec([1.0, 2.0])
        node = a.node
        with pytest.raises(LengthMismatchError) as exc:
            a.mutate([1.0, 2.0, 3.0])
        assert exc.value.required == 2
        assert exc.value.actual == 3
        assert "length 3" in str(exc.value)
        np.testing.assert_array_equal(a.values, [1.0, 2.0])
        assert a.node is node

    def test_captured_buffers_see_mutation(self):
        a = GradVec([2.0, 3.0])
        b = GradVec([5.0, 7.0])
        c = a * b
        np.testing.assert_array_equal(c.evaluate_grad(b), [2.0, 3.0])
        a.mutate([10.0, 20.0])
        # the Mul node holds a's buffer, not a copy
        np.testing.assert_array_equal(c.evaluate_grad(b), [10.0, 20.0])
