# vecgrad/core/node.py
"""
Computation nodes: immutable records of how a value buffer was produced.

A node never changes after construction. Nodes are compared by identity
only (`eq=False`), which is how `evaluate` recognises the query variable.
Captured value buffers are the operands' own ndarrays, not copies: if an
operand is mutated later, the node sees the new contents on the next
evaluation. Finish every gradient query on a graph before mutating a vector
it references.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np


class Node:
    """
    Base class for all computation nodes.

    Subclasses implement `backward(target, like)`, the derivative of the
    owning vector with respect to the vector owning `target`, assuming this
    node is not `target` itself.
    """
    op_tag = "node"

    def children(self) -> Tuple["Node", ...]:
        return ()

    def backward(self, target: "Node", like: np.ndarray) -> np.ndarray:
        raise NotImplementedError


def evaluate(node: Node, target: Node, like: np.ndarray) -> np.ndarray:
    """
    Elementwise derivative of the vector owning `node` with respect to the
    vector owning `target`.

    Parameters
    ----------
    node   : Node of the output vector.
    target : Node of the query variable.
    like   : value buffer of the query variable; fixes length and dtype of
             the seeds (ones for the variable itself, zeros for other leaves).

    No memoisation: a node reached along several paths is evaluated once per
    path, which yields the sum over paths.
    """
    if node is target:
        return np.ones_like(like)
    return node.backward(target, like)


@dataclass(frozen=True, eq=False)
class Leaf(Node):
    """An independent variable or constant."""
    op_tag = "leaf"

    def backward(self, target, like):
        return np.zeros_like(like)


@dataclass(frozen=True, eq=False)
class Add(Node):
    lhs: Node
    rhs: Node
    op_tag = "add"

    def children(self):
        return (self.lhs, self.rhs)

    def backward(self, target, like):
        return evaluate(self.lhs, target, like) + evaluate(self.rhs, target, like)


@dataclass(frozen=True, eq=False)
class Sub(Node):
    lhs: Node
    rhs: Node
    op_tag = "sub"

    def children(self):
        return (self.lhs, self.rhs)

    def backward(self, target, like):
        return evaluate(self.lhs, target, like) - evaluate(self.rhs, target, like)


@dataclass(frozen=True, eq=False)
class Mul(Node):
    """Product rule with the operand buffers captured at construction."""
    lhs: Node
    rhs: Node
    lhs_vals: np.ndarray
    rhs_vals: np.ndarray
    op_tag = "mul"

    def children(self):
        return (self.lhs, self.rhs)

    def backward(self, target, like):
        dl = evaluate(self.lhs, target, like)
        dr = evaluate(self.rhs, target, like)
        return dl * self.rhs_vals + self.lhs_vals * dr


@dataclass(frozen=True, eq=False)
class Div(Node):
    """Quotient rule: (dl*r - l*dr) / r**2."""
    lhs: Node
    rhs: Node
    lhs_vals: np.ndarray
    rhs_vals: np.ndarray
    op_tag = "div"

    def children(self):
        return (self.lhs, self.rhs)

    def backward(self, target, like):
        dl = evaluate(self.lhs, target, like)
        dr = evaluate(self.rhs, target, like)
        r = self.rhs_vals
        return (dl * r - self.lhs_vals * dr) / (r * r)


@dataclass(frozen=True, eq=False)
class Neg(Node):
    child: Node
    op_tag = "neg"

    def children(self):
        return (self.child,)

    def backward(self, target, like):
        return -evaluate(self.child, target, like)


@dataclass(frozen=True, eq=False)
class Abs(Node):
    """Sign flip where the original input was negative; zero keeps the sign."""
    child: Node
    inputs: np.ndarray
    op_tag = "abs"

    def children(self):
        return (self.child,)

    def backward(self, target, like):
        d = evaluate(self.child, target, like)
        return np.where(self.inputs < 0, -d, d)


@dataclass(frozen=True, eq=False)
class Elementwise(Node):
    """
    One node type for every elementwise function f.

    `captured` is whichever buffer the derivative needs (the input for
    sin/cos/ln, the output for exp) and `derivative(d, captured)` maps the
    child's derivative `d` to the derivative of f(child).
    """
    name: str
    child: Node
    captured: np.ndarray
    derivative: Callable[[np.ndarray, np.ndarray], np.ndarray]

    @property
    def op_tag(self):
        return self.name

    def children(self):
        return (self.child,)

    def backward(self, target, like):
        return self.derivative(evaluate(self.child, target, like), self.captured)
