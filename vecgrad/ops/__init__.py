# vecgrad/ops/__init__.py

from .arithmetic import add, sub, mul, div, neg, absolute
from .transcendental import exp, sin, cos, ln, log

__all__ = [
    "add", "sub", "mul", "div", "neg", "absolute",
    "exp", "sin", "cos", "ln", "log",
]
