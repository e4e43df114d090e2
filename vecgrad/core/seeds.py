# vecgrad/core/seeds.py

#-----------------------------------------------------------------------------
# Convenience entry points: wrap a plain sequence as a leaf, run the user's
# function on it, and query the gradient of the result against that leaf.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Iterable, Optional

import numpy as np

from .var import GradVec


def value(x: Any) -> Any:
    """Return the value buffer of a GradVec; pass plain numbers unchanged."""
    return x.values if isinstance(x, GradVec) else x


def grad(f: Callable[[GradVec], GradVec], x0: Iterable,
         *, dtype: Optional[Any] = None) -> np.ndarray:
    """
    Elementwise derivative of y = f(x) at x0.

    Example
    -------
    grad(lambda x: x * x, [1.0, 3.0]) -> array([2., 6.])
    """
    x = x0 if isinstance(x0, GradVec) else GradVec(x0, dtype=dtype)
    y = f(x)
    if not isinstance(y, GradVec):
        raise TypeError(f"grad(f, x0) expects f to return a GradVec, got {type(y).__name__}")
    return y.evaluate_grad(x)
