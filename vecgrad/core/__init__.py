# vecgrad/core/__init__.py

"""
Core public API for vecgrad.

Exports:
    GradVec             : Differentiable vector (value buffer + provenance node).
    Node, Leaf, evaluate: Computation nodes and the gradient query over them.
    LengthMismatchError : Raised when buffers that must match in length do not.
    precision_context   : Context manager to switch the default dtype.
    grad, value         : Convenience helpers.
"""

from .errors import VecGradError, LengthMismatchError
from .node import Node, Leaf, evaluate
from .precision import PrecisionMode, PrecisionConfig, set_precision, precision_context
from .var import GradVec
from .seeds import grad, value
from .graph_utils import graph_summary, print_graph_summary

__all__ = [
    "GradVec",
    "Node", "Leaf", "evaluate",
    "VecGradError", "LengthMismatchError",
    "PrecisionMode", "PrecisionConfig", "set_precision", "precision_context",
    "grad", "value",
    "graph_summary", "print_graph_summary",
]
