# vecgrad/ops/transcendental.py
import numpy as np

from ..core.node import Elementwise
from ..core.precision import is_floating
from ..core.var import GradVec


def _unary(x, tag, forward, derivative, *, capture_output=False):
    if not is_floating(x.values):
        raise TypeError(f"{tag} is only defined for floating-point vectors, "
                        f"got dtype {x.values.dtype}")
    out = forward(x.values)
    captured = out if capture_output else x.values
    return GradVec._wrap(out, Elementwise(tag, x.node, captured, derivative))


def _d_exp(d, ys):
    # ys is exp(x) itself
    return d * ys


def _d_sin(d, xs):
    return d * np.cos(xs)


def _d_cos(d, xs):
    return -d * np.sin(xs)


def _d_ln(d, xs):
    return d / xs


def exp(x):
    return _unary(x, "exp", np.exp, _d_exp, capture_output=True)


def sin(x):
    return _unary(x, "sin", np.sin, _d_sin)


def cos(x):
    return _unary(x, "cos", np.cos, _d_cos)


def ln(x):
    """Natural log; non-positive inputs give NumPy's nan/-inf, not an error."""
    return _unary(x, "ln", np.log, _d_ln)


log = ln
