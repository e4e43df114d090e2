# vecgrad/__init__.py
# Elementwise automatic differentiation over flat vectors

from .core.var import GradVec
from .core.node import Node, Leaf, evaluate
from .core.errors import VecGradError, LengthMismatchError
from .core.precision import PrecisionMode, set_precision, precision_context
from .core.seeds import grad, value
from .core.graph_utils import graph_summary, print_graph_summary

# Operation catalog (also reachable through GradVec operators)
from . import ops
from .ops import exp, sin, cos, ln, log, absolute

# Optimizer
from .optim import GDConfig, GradientDescent, gd

from .utils import diag

__version__ = "0.1.0"

__all__ = [
    # Core
    'GradVec',
    'Node',
    'Leaf',
    'evaluate',
    'VecGradError',
    'LengthMismatchError',
    'PrecisionMode',
    'set_precision',
    'precision_context',
    'grad',
    'value',
    'graph_summary',
    'print_graph_summary',
    # Ops
    'ops',
    'exp',
    'sin',
    'cos',
    'ln',
    'log',
    'absolute',
    # Optim
    'GDConfig',
    'GradientDescent',
    'gd',
    # Utils
    'diag',
]
