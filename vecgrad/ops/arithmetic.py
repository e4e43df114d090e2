# vecgrad/ops/arithmetic.py
import numpy as np

from ..core.errors import LengthMismatchError
from ..core.node import Abs, Add, Div, Mul, Neg, Sub
from ..core.var import GradVec, is_scalar


def _coerce(x, y, tag):
    """Turn a (vector, scalar) pair into two vectors; the scalar becomes a leaf."""
    x_vec, y_vec = isinstance(x, GradVec), isinstance(y, GradVec)
    if x_vec and y_vec:
        return x, y
    if x_vec and is_scalar(y):
        return x, GradVec.from_scalar(x, y)
    if y_vec and is_scalar(x):
        return GradVec.from_scalar(y, x), y
    raise TypeError(
        f"unsupported operand types for {tag}: "
        f"{type(x).__name__!r} and {type(y).__name__!r}"
    )


def _binary(x, y, f, make_node, tag):
    """
    Generic binary primitive:
      - broadcasts a scalar operand to a constant leaf
      - checks that both buffers have the same length
      - computes out.values = f(x.values, y.values)
      - builds the node from the two operand vectors
    """
    x, y = _coerce(x, y, tag)
    if len(x) != len(y):
        raise LengthMismatchError(len(x), len(y))
    return GradVec._wrap(f(x.values, y.values), make_node(x, y))


def add(x, y):
    # vector + scalar keeps the vector's node: the constant has no gradient
    if isinstance(x, GradVec) and is_scalar(y):
        return GradVec._wrap(x.values + y, x.node)
    if is_scalar(x) and isinstance(y, GradVec):
        return GradVec._wrap(x + y.values, y.node)
    return _binary(x, y, np.add, lambda a, b: Add(a.node, b.node), "add")


def sub(x, y):
    return _binary(x, y, np.subtract, lambda a, b: Sub(a.node, b.node), "sub")


def mul(x, y):
    return _binary(x, y, np.multiply,
                   lambda a, b: Mul(a.node, b.node, a.values, b.values), "mul")


def div(x, y):
    return _binary(x, y, np.true_divide,
                   lambda a, b: Div(a.node, b.node, a.values, b.values), "div")


def neg(x):
    """
    Unary negation:
      out.values = -x.values
      d(out)     = -d(x)
    """
    return GradVec._wrap(np.negative(x.values), Neg(x.node))


def absolute(x):
    """
    Elementwise magnitude. The derivative flips sign where the input was
    negative; zero takes the positive branch.
    """
    return GradVec._wrap(np.abs(x.values), Abs(x.node, x.values))
