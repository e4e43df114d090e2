# vecgrad/core/var.py
from __future__ import annotations
import logging
import numbers
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from .errors import LengthMismatchError
from .node import Leaf, Node, evaluate
from .precision import default_dtype

logger = logging.getLogger(__name__)


def is_scalar(x: Any) -> bool:
    """True for plain numbers and NumPy scalars (the broadcastable operands)."""
    return isinstance(x, (numbers.Number, np.number)) and not isinstance(x, bool)


class GradVec:
    """
    Differentiable vector: a 1-D value buffer plus the node describing how
    it was derived.

    Attributes
    ----------
    values : np.ndarray
        The value buffer. Nodes built from this vector hold a reference to
        this very array, so it is only ever updated in place.
    node : Node
        Provenance of `values`. A vector built with `GradVec(...)` or
        `from_scalar` has a fresh `Leaf`.

    Construction from raw data is the only way to create an independent
    variable; operators always return a new vector with a new node.
    """

    # Keep NumPy from broadcasting over a GradVec in mixed expressions such
    # as `np.float64(2.0) * v`; Python then falls back to our reflected ops.
    __array_ufunc__ = None

    def __init__(self, values: Iterable, *, dtype: Optional[Any] = None):
        if is_scalar(values):
            raise TypeError(
                "GradVec needs a sequence of numbers; "
                "use GradVec.from_scalar to broadcast a single value"
            )
        if not isinstance(values, (list, tuple, np.ndarray)):
            values = list(values)
        buf = np.array(values, dtype=dtype if dtype is not None else default_dtype())
        if buf.ndim != 1:
            raise ValueError(f"GradVec holds a flat vector, got shape {buf.shape}")
        self.values = buf
        self.node: Node = Leaf()

    @classmethod
    def from_sequence(cls, values: Iterable, *, dtype: Optional[Any] = None) -> "GradVec":
        return cls(values, dtype=dtype)

    @classmethod
    def from_scalar(cls, reference: "GradVec", value) -> "GradVec":
        """A leaf of len(reference) copies of `value`."""
        dtype = np.result_type(reference.values.dtype, value)
        return cls._wrap(np.full(len(reference), value, dtype=dtype), Leaf())

    @classmethod
    def _wrap(cls, values: np.ndarray, node: Node) -> "GradVec":
        # operators hand over a freshly computed buffer; no copy
        out = cls.__new__(cls)
        out.values = values
        out.node = node
        return out

    # ------------------------------------------------------------------ #
    def evaluate_grad(self, target: "GradVec") -> np.ndarray:
        """
        d(self)/d(target), elementwise.

        Raises LengthMismatchError if the two vectors differ in length.
        """
        if len(target) != len(self):
            raise LengthMismatchError(len(self), len(target))
        return evaluate(self.node, target.node, target.values)

    def mutate(self, values: Iterable) -> None:
        """
        Overwrite the buffer in place and detach from any graph.

        Raises LengthMismatchError (and changes nothing) when `values` has a
        different length. Nodes elsewhere that captured this buffer observe
        the new contents.
        """
        if not isinstance(values, (list, tuple, np.ndarray)):
            values = list(values)
        data = np.asarray(values, dtype=self.values.dtype)
        if data.shape != self.values.shape:
            raise LengthMismatchError(len(self), data.size)
        self.values[...] = data
        self.node = Leaf()
        logger.debug("mutated vector of length %d; node reset to leaf", len(self))

    @property
    def data(self) -> np.ndarray:
        """A copy of the current values."""
        return self.values.copy()

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype

    def __len__(self) -> int:
        return self.values.shape[0]

    def __iter__(self) -> Iterator:
        return iter(self.values.tolist())

    def __repr__(self):
        return f"GradVec({self.values.tolist()!r}, op={self.node.op_tag!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other) if _operand(other) else NotImplemented

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self) if _operand(other) else NotImplemented

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other) if _operand(other) else NotImplemented

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self) if _operand(other) else NotImplemented

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other) if _operand(other) else NotImplemented

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self) if _operand(other) else NotImplemented

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other) if _operand(other) else NotImplemented

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self) if _operand(other) else NotImplemented

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __abs__(self):
        from ..ops.arithmetic import absolute
        return absolute(self)

    # Elementwise functions
    def abs(self) -> "GradVec":
        from ..ops.arithmetic import absolute
        return absolute(self)

    def exp(self) -> "GradVec":
        from ..ops.transcendental import exp
        return exp(self)

    def sin(self) -> "GradVec":
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self) -> "GradVec":
        from ..ops.transcendental import cos
        return cos(self)

    def ln(self) -> "GradVec":
        from ..ops.transcendental import ln
        return ln(self)

    log = ln


def _operand(x) -> bool:
    return isinstance(x, GradVec) or is_scalar(x)
