# vecgrad/optim/__init__.py

from .gd import GDConfig, GradientDescent, gd

__all__ = ["GDConfig", "GradientDescent", "gd"]
